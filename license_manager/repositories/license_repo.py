from datetime import date
from license_manager.models.license import License
from license_manager.extensions import db


class LicenseRepo:
    @staticmethod
    def list_all():
        return License.query.order_by(License.id.asc()).all()

    @staticmethod
    def get(license_id: int):
        return db.session.get(License, license_id)

    @staticmethod
    def list_by_ids(ids):
        if not ids:
            return []
        return License.query.filter(License.id.in_(list(ids))).all()

    @staticmethod
    def list_by_product(product: str):
        return License.query.filter_by(product=product).all()

    @staticmethod
    def list_unlinked_by_reseller(reseller: str):
        return License.query.filter(
            License.reseller == reseller,
            License.supplier_id.is_(None),
        ).all()

    @staticmethod
    def find_expiring(start: date, end: date):
        """Licenses expiring in [start, end] with a contactable reseller."""
        return License.query.filter(
            License.expiration_date.isnot(None),
            License.expiration_date >= start,
            License.expiration_date <= end,
            License.reseller_email.isnot(None),
            License.reseller_email.contains("@"),
        ).order_by(License.expiration_date.asc(), License.id.asc()).all()

    @staticmethod
    def add(lic: License):
        db.session.add(lic)
        return lic

    @staticmethod
    def delete(lic: License):
        db.session.delete(lic)

    @staticmethod
    def delete_all():
        # RDAs keep their row; their license link is dropped first.
        from license_manager.models.rda import Rda
        Rda.query.filter(Rda.license_id.isnot(None)).update({Rda.license_id: None}, synchronize_session=False)
        License.query.delete(synchronize_session=False)

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

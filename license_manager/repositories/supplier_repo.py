from license_manager.models.supplier import Supplier
from license_manager.extensions import db


class SupplierRepo:
    @staticmethod
    def list_all():
        return Supplier.query.order_by(Supplier.id.asc()).all()

    @staticmethod
    def get(supplier_id: int):
        return db.session.get(Supplier, supplier_id)

    @staticmethod
    def add(supplier: Supplier):
        db.session.add(supplier)
        db.session.flush()  # id needed for license links
        return supplier

    @staticmethod
    def delete(supplier: Supplier):
        for lic in list(supplier.licenses):
            lic.supplier_id = None
        db.session.delete(supplier)

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

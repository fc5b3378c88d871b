from license_manager.models.rda import Rda
from license_manager.extensions import db


class RdaRepo:
    @staticmethod
    def list_all():
        return Rda.query.order_by(Rda.id.asc()).all()

    @staticmethod
    def replace_all(rows):
        Rda.query.delete(synchronize_session=False)
        db.session.add_all(rows)

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

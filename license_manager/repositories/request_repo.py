from license_manager.models.purchase_request import PurchaseRequest
from license_manager.extensions import db


class RequestRepo:
    @staticmethod
    def list_all():
        return PurchaseRequest.query.order_by(PurchaseRequest.id.asc()).all()

    @staticmethod
    def get(request_id: int):
        return db.session.get(PurchaseRequest, request_id)

    @staticmethod
    def add(row: PurchaseRequest):
        db.session.add(row)
        return row

    @staticmethod
    def commit():
        db.session.commit()

    @staticmethod
    def rollback():
        db.session.rollback()

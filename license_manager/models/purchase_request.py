from datetime import datetime
from license_manager.extensions import db


class PurchaseRequest(db.Model):
    __tablename__ = "purchase_requests"

    id = db.Column(db.Integer, primary_key=True)
    requester = db.Column(db.String(200), nullable=False, default="")
    product = db.Column(db.String(200), nullable=False, default="")
    quantity = db.Column(db.Integer, nullable=False, default=0)
    budget = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    year = db.Column(db.Integer, nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "requester": self.requester,
            "product": self.product,
            "quantity": self.quantity,
            "budget": float(self.budget),
            "year": self.year,
        }

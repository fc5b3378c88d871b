from datetime import datetime
from license_manager.extensions import db


class License(db.Model):
    __tablename__ = "licenses"

    id = db.Column(db.Integer, primary_key=True)

    manufacturer = db.Column(db.String(200), nullable=False, default="")
    product = db.Column(db.String(200), nullable=False, index=True)
    license_type = db.Column(db.String(100), nullable=False, default="")
    license_count = db.Column(db.Integer, nullable=False, default=0)
    bundle_count = db.Column(db.Integer, nullable=False, default=0)
    borrowable = db.Column(db.Boolean, nullable=False, default=False)
    contract = db.Column(db.String(200), nullable=False, default="")

    reseller = db.Column(db.String(200), nullable=False, default="", index=True)
    reseller_email = db.Column(db.String(255), nullable=True)
    expiration_date = db.Column(db.Date, nullable=True, index=True)

    supplier_id = db.Column(db.Integer, db.ForeignKey("suppliers.id"), nullable=True, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    supplier = db.relationship("Supplier", back_populates="licenses")

    def to_dict(self):
        return {
            "id": self.id,
            "manufacturer": self.manufacturer,
            "product": self.product,
            "license_type": self.license_type,
            "license_count": self.license_count,
            "bundle_count": self.bundle_count,
            "borrowable": bool(self.borrowable),
            "contract": self.contract,
            "reseller": self.reseller,
            "reseller_email": self.reseller_email,
            "expiration_date": self.expiration_date.isoformat() if self.expiration_date else None,
            "supplier_id": self.supplier_id,
        }

from license_manager.extensions import db


class Rda(db.Model):
    """Purchase-request reference (RDA) tied to a product, reseller and year."""
    __tablename__ = "rdas"

    id = db.Column(db.Integer, primary_key=True)
    rda = db.Column(db.String(500), unique=True, nullable=False)
    product = db.Column(db.String(200), nullable=False, default="")
    year = db.Column(db.Integer, nullable=False)
    reseller = db.Column(db.String(200), nullable=False, default="")

    license_id = db.Column(db.Integer, db.ForeignKey("licenses.id", ondelete="SET NULL"), nullable=True, index=True)

    license = db.relationship("License", backref="rdas")

    def to_dict(self):
        return {
            "id": self.id,
            "rda": self.rda,
            "product": self.product,
            "year": self.year,
            "reseller": self.reseller,
            "license_id": self.license_id,
        }

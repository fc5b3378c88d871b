from license_manager.extensions import db


class Supplier(db.Model):
    __tablename__ = "suppliers"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    year = db.Column(db.Integer, nullable=True)
    email = db.Column(db.String(255), nullable=True)
    rda_link = db.Column(db.String(500), nullable=True)
    sole_supplier = db.Column(db.Boolean, nullable=False, default=False)
    product = db.Column(db.String(200), nullable=True)

    licenses = db.relationship("License", back_populates="supplier", order_by="License.id")

    def to_dict(self, with_licenses: bool = False):
        data = {
            "id": self.id,
            "name": self.name,
            "year": self.year,
            "email": self.email,
            "rda_link": self.rda_link,
            "sole_supplier": bool(self.sole_supplier),
            "product": self.product,
        }
        if with_licenses:
            data["licenses"] = [lic.to_dict() for lic in self.licenses]
        return data

"""License import schemas."""

from pydantic import TypeAdapter

from license_manager.schemas.base import (
    BaseSchema, Count, Flag, OptionalDate, OptionalEmail, OptionalId,
    optional_text, required_text,
)


class LicenseIn(BaseSchema):
    manufacturer: optional_text(200) = None
    product: required_text(200)
    license_type: optional_text(100) = None
    license_count: Count = 0
    bundle_count: Count = 0
    borrowable: Flag = False
    contract: optional_text(200) = None
    reseller: optional_text(200) = None
    reseller_email: OptionalEmail = None
    expiration_date: OptionalDate = None
    supplier_id: OptionalId = None

    def to_columns(self) -> dict:
        return {
            "manufacturer": self.manufacturer or "",
            "product": self.product,
            "license_type": self.license_type or "",
            "license_count": self.license_count,
            "bundle_count": self.bundle_count,
            "borrowable": self.borrowable,
            "contract": self.contract or "",
            "reseller": self.reseller or "",
            "reseller_email": self.reseller_email,
            "expiration_date": self.expiration_date,
            "supplier_id": self.supplier_id,
        }


LICENSE_ROWS = TypeAdapter(list[LicenseIn])

"""Supplier upsert schemas."""

from typing import Optional

from pydantic import TypeAdapter

from license_manager.schemas.base import (
    BaseSchema, Flag, Id, OptionalEmail, OptionalId, OptionalYear,
    optional_text, required_text,
)


class SupplierIn(BaseSchema):
    id: OptionalId = None
    name: required_text(200)
    year: OptionalYear = None
    email: OptionalEmail = None
    rda_link: optional_text(500) = None
    sole_supplier: Flag = False
    product: optional_text(200) = None
    license_ids: Optional[list[Id]] = None

    def link_ids(self):
        """None when license_ids was not sent (links untouched), else the id list."""
        if "license_ids" not in self.model_fields_set:
            return None
        return self.license_ids or []

    def to_columns(self) -> dict:
        return self.model_dump(exclude={"id", "license_ids"})


SUPPLIER_ROWS = TypeAdapter(list[SupplierIn])

"""RDA import schemas."""

from pydantic import TypeAdapter

from license_manager.schemas.base import BaseSchema, OptionalId, Year, optional_text, required_text


class RdaIn(BaseSchema):
    rda: required_text(500)
    product: optional_text(200) = None
    year: Year
    reseller: optional_text(200) = None
    license_id: OptionalId = None


RDA_ROWS = TypeAdapter(list[RdaIn])

"""Purchase request schemas."""

from decimal import Decimal

from pydantic import TypeAdapter

from license_manager.schemas.base import BaseSchema, Money, OptionalId, Quantity, Year, required_text


class PurchaseRequestIn(BaseSchema):
    id: OptionalId = None
    requester: required_text(200)
    product: required_text(200)
    quantity: Quantity
    budget: Money = Decimal("0.00")
    year: Year

    def to_columns(self) -> dict:
        return self.model_dump(exclude={"id"})


PURCHASE_REQUEST_ROWS = TypeAdapter(list[PurchaseRequestIn])

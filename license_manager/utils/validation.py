# license_manager/utils/validation.py
from __future__ import annotations


class ValidationError(ValueError):
    """Rejected payload. `field` names the offending key, `row` the array index."""

    def __init__(self, message: str, field: str | None = None, row: int | None = None):
        self.message = message
        self.field = field
        self.row = row
        prefix = f"row {row}: " if row is not None else ""
        super().__init__(prefix + message)

    def at_row(self, row: int) -> "ValidationError":
        return ValidationError(self.message, field=self.field, row=row)


class NotFoundError(ValueError):
    pass

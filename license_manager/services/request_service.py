from decimal import Decimal

from license_manager.models.purchase_request import PurchaseRequest
from license_manager.repositories.request_repo import RequestRepo
from license_manager.schemas.base import validate_rows
from license_manager.schemas.purchase_request import PURCHASE_REQUEST_ROWS
from license_manager.utils.validation import NotFoundError


class RequestService:
    @staticmethod
    def list_requests():
        return RequestRepo.list_all()

    @staticmethod
    def save_all(payload) -> dict:
        """Rows without an id are created, rows with an id are updated."""
        rows = validate_rows(PURCHASE_REQUEST_ROWS, payload, "Request")

        created = updated = 0
        try:
            for i, row in enumerate(rows):
                fields = row.to_columns()
                fields["budget"] = fields["budget"].quantize(Decimal("0.01"))
                if row.id is None:
                    RequestRepo.add(PurchaseRequest(**fields))
                    created += 1
                    continue
                existing = RequestRepo.get(row.id)
                if not existing:
                    raise NotFoundError(f"row {i}: request {row.id} not found")
                for key, value in fields.items():
                    setattr(existing, key, value)
                updated += 1
            RequestRepo.commit()
        except Exception:
            RequestRepo.rollback()
            raise
        return {"created": created, "updated": updated}

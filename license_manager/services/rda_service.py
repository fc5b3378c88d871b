from license_manager.models.rda import Rda
from license_manager.repositories.license_repo import LicenseRepo
from license_manager.repositories.rda_repo import RdaRepo
from license_manager.schemas.base import validate_rows
from license_manager.schemas.rda import RDA_ROWS, RdaIn
from license_manager.utils.validation import ValidationError


class RdaService:
    @staticmethod
    def list_rdas():
        return RdaRepo.list_all()

    @staticmethod
    def _resolve_license_id(row: RdaIn):
        if row.license_id is not None:
            if not LicenseRepo.get(row.license_id):
                raise ValidationError(f"license_id {row.license_id} does not exist", field="license_id")
            return row.license_id
        # fallback for legacy payloads: unique product name match
        matches = LicenseRepo.list_by_product(row.product) if row.product else []
        return matches[0].id if len(matches) == 1 else None

    @staticmethod
    def replace_all(payload) -> int:
        rows = validate_rows(RDA_ROWS, payload, "RDA")
        rdas = []
        seen = set()
        for i, row in enumerate(rows):
            try:
                if row.rda in seen:
                    raise ValidationError("Duplicate value for field: rda", field="rda")
                seen.add(row.rda)
                rdas.append(Rda(
                    rda=row.rda,
                    product=row.product or "",
                    year=row.year,
                    reseller=row.reseller or "",
                    license_id=RdaService._resolve_license_id(row),
                ))
            except ValidationError as e:
                raise e.at_row(i)

        try:
            RdaRepo.replace_all(rdas)
            RdaRepo.commit()
        except Exception:
            RdaRepo.rollback()
            raise
        return len(rdas)

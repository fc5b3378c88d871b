import csv
import io

from license_manager.models.license import License
from license_manager.repositories.license_repo import LicenseRepo
from license_manager.repositories.supplier_repo import SupplierRepo
from license_manager.schemas.base import validate_one, validate_rows
from license_manager.schemas.license import LICENSE_ROWS, LicenseIn
from license_manager.utils.validation import NotFoundError, ValidationError

EXPORT_COLUMNS = [
    "id", "manufacturer", "product", "license_type", "license_count", "bundle_count",
    "borrowable", "contract", "reseller", "reseller_email", "expiration_date", "supplier_id",
]


def _check_supplier(fields: dict) -> dict:
    supplier_id = fields.get("supplier_id")
    if supplier_id is not None and not SupplierRepo.get(supplier_id):
        raise ValidationError(f"supplier_id {supplier_id} does not exist", field="supplier_id")
    return fields


class LicenseService:
    @staticmethod
    def list_licenses():
        return LicenseRepo.list_all()

    @staticmethod
    def get_license(license_id: int):
        lic = LicenseRepo.get(license_id)
        if not lic:
            raise NotFoundError("License not found")
        return lic

    @staticmethod
    def create_license(data: dict):
        lic = License(**_check_supplier(validate_one(LicenseIn, data).to_columns()))
        LicenseRepo.add(lic)
        LicenseRepo.commit()
        return lic

    @staticmethod
    def update_license(license_id: int, data: dict):
        """PUT semantics: the merged record is validated, only sent keys are written."""
        lic = LicenseService.get_license(license_id)
        if not isinstance(data, dict):
            raise ValidationError("expected an object")
        fields = validate_one(LicenseIn, {**lic.to_dict(), **data}).to_columns()
        changes = {key: value for key, value in fields.items() if key in data}
        for key, value in _check_supplier(changes).items():
            setattr(lic, key, value)
        LicenseRepo.commit()
        return lic

    @staticmethod
    def delete_license(license_id: int):
        lic = LicenseService.get_license(license_id)
        for rda in list(lic.rdas):
            rda.license_id = None
        LicenseRepo.delete(lic)
        LicenseRepo.commit()

    @staticmethod
    def replace_all(payload) -> int:
        """
        Bulk import: the whole table is replaced by the payload in a single
        transaction. Every row is validated before anything is deleted.
        """
        rows = validate_rows(LICENSE_ROWS, payload, "license")
        licenses = []
        for i, row in enumerate(rows):
            try:
                licenses.append(License(**_check_supplier(row.to_columns())))
            except ValidationError as e:
                raise e.at_row(i)

        try:
            LicenseRepo.delete_all()
            for lic in licenses:
                LicenseRepo.add(lic)
            LicenseRepo.commit()
        except Exception:
            LicenseRepo.rollback()
            raise
        return len(licenses)

    @staticmethod
    def export_csv() -> str:
        buf = io.StringIO()
        writer = csv.DictWriter(buf, fieldnames=EXPORT_COLUMNS)
        writer.writeheader()
        for lic in LicenseRepo.list_all():
            row = lic.to_dict()
            row["expiration_date"] = row["expiration_date"] or ""
            row["reseller_email"] = row["reseller_email"] or ""
            row["supplier_id"] = row["supplier_id"] if row["supplier_id"] is not None else ""
            writer.writerow(row)
        return buf.getvalue()

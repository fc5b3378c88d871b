from collections import defaultdict

from license_manager.models.supplier import Supplier
from license_manager.repositories.license_repo import LicenseRepo
from license_manager.repositories.supplier_repo import SupplierRepo
from license_manager.schemas.base import validate_rows
from license_manager.schemas.supplier import SUPPLIER_ROWS
from license_manager.utils.validation import NotFoundError, ValidationError


class SupplierService:
    @staticmethod
    def list_suppliers():
        return SupplierRepo.list_all()

    @staticmethod
    def save_all(payload) -> int:
        """
        Upsert by id: rows with a known id are updated, rows without one are
        created. `license_ids` (when given) replaces the supplier's links.
        """
        rows = validate_rows(SUPPLIER_ROWS, payload, "supplier")

        try:
            for i, row in enumerate(rows):
                fields = row.to_columns()
                if row.id is not None:
                    supplier = SupplierRepo.get(row.id)
                    if not supplier:
                        raise NotFoundError(f"row {i}: supplier {row.id} not found")
                    for key, value in fields.items():
                        setattr(supplier, key, value)
                else:
                    supplier = SupplierRepo.add(Supplier(**fields))

                license_ids = row.link_ids()
                if license_ids is not None:
                    SupplierService._set_links(supplier, license_ids, row=i)
            SupplierRepo.commit()
        except Exception:
            SupplierRepo.rollback()
            raise
        return len(rows)

    @staticmethod
    def _set_links(supplier: Supplier, license_ids, row: int):
        licenses = LicenseRepo.list_by_ids(license_ids)
        missing = set(license_ids) - {lic.id for lic in licenses}
        if missing:
            raise ValidationError(
                f"unknown license ids: {', '.join(str(x) for x in sorted(missing))}",
                field="license_ids", row=row,
            )
        for lic in list(supplier.licenses):
            if lic.id not in license_ids:
                lic.supplier_id = None
        for lic in licenses:
            lic.supplier_id = supplier.id

    @staticmethod
    def delete_supplier(supplier_id: int):
        supplier = SupplierRepo.get(supplier_id)
        if not supplier:
            raise NotFoundError("Supplier not found")
        SupplierRepo.delete(supplier)
        SupplierRepo.commit()

    @staticmethod
    def relink_by_name() -> dict:
        """
        One-off migration aid for data imported before licenses carried a
        supplier_id: links unlinked licenses whose reseller string equals a
        supplier name. Names shared by several suppliers are skipped.
        """
        by_name = defaultdict(list)
        for supplier in SupplierRepo.list_all():
            by_name[supplier.name.strip()].append(supplier)

        linked = 0
        ambiguous = []
        for name, suppliers in by_name.items():
            if not name:
                continue
            if len(suppliers) > 1:
                ambiguous.append(name)
                continue
            for lic in LicenseRepo.list_unlinked_by_reseller(name):
                lic.supplier_id = suppliers[0].id
                linked += 1
        SupplierRepo.commit()
        return {"linked": linked, "ambiguous": sorted(ambiguous)}

"""
Appointment service: the single mutation path for the appointment collection.

Validation happens on the request DTO before the repository is touched, so a
rejected create/update leaves the collection unchanged. Ordering is owned by
the repository, which re-sorts after every write.
"""

import logging
from typing import Any, Iterable, List

from manicurista.core.exceptions import ImportFormatError, NotFoundError, ValidationError
from manicurista.domain.entities import Appointment
from manicurista.domain.interfaces import IAppointmentRepository
from manicurista.schemas.dtos import AppointmentCreateRequest, AppointmentUpdateRequest
from manicurista.services.import_normalizer import EXPECTED_COLUMNS, normalize_rows

logger = logging.getLogger(__name__)


class AppointmentService:
    """Application service for appointment use-cases."""

    def __init__(self, appointment_repo: IAppointmentRepository):
        self.appointment_repo = appointment_repo

    def create_appointment(self, request: AppointmentCreateRequest) -> Appointment:
        """Validate the draft, assign a fresh id and store it."""
        request.validate()
        appointment = self._to_domain(request)
        created = self.appointment_repo.create(appointment)

        logger.info(
            "Appointment created",
            extra={
                "context": {
                    "appointment_id": created.id,
                    "date": created.date.isoformat(),
                    "time": created.time,
                    "status": created.status.value,
                }
            },
        )
        return created

    def update_appointment(
        self, appointment_id: int, request: AppointmentUpdateRequest
    ) -> Appointment:
        """Replace every mutable field of an existing appointment."""
        if self.appointment_repo.get_by_id(appointment_id) is None:
            raise NotFoundError("Appointment", appointment_id)

        request.validate()
        updated = self.appointment_repo.update(
            self._to_domain(request, appointment_id=appointment_id)
        )

        logger.info(
            "Appointment updated",
            extra={
                "context": {
                    "appointment_id": appointment_id,
                    "status": updated.status.value,
                }
            },
        )
        return updated

    def delete_appointment(self, appointment_id: int) -> bool:
        """Remove an appointment. Unknown ids are a no-op returning False."""
        deleted = self.appointment_repo.delete(appointment_id)
        if not deleted:
            logger.debug(
                "Delete requested for unknown appointment",
                extra={"context": {"appointment_id": appointment_id}},
            )
        else:
            logger.info(
                "Appointment deleted",
                extra={"context": {"appointment_id": appointment_id}},
            )
        return deleted

    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self.appointment_repo.get_by_id(appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment", appointment_id)
        return appointment

    def list_appointments(self) -> List[Appointment]:
        return self.appointment_repo.list_all()

    def bulk_import(self, rows: Iterable[Any]) -> int:
        """Normalize and store spreadsheet rows in one step.

        Returns the number of stored appointments. An empty input stores
        nothing; a non-empty input where no row survives raises
        ImportFormatError and leaves the collection untouched.
        """
        rows = list(rows or [])
        if not rows:
            logger.info("Bulk import called with no rows")
            return 0

        result = normalize_rows(rows)
        drafts: List[Appointment] = []
        skipped: List[int] = []
        for row in result.accepted:
            if not row.has_valid_date:
                skipped.append(row.source_index)
                continue
            drafts.append(row.to_domain())

        if skipped:
            logger.warning(
                "Skipping imported rows without a usable date",
                extra={"context": {"row_indexes": skipped}},
            )

        if not drafts:
            logger.warning(
                "Bulk import produced no appointments",
                extra={
                    "context": {
                        "total_rows": result.total,
                        "rejected": len(result.rejected),
                        "skipped": len(skipped),
                    }
                },
            )
            raise ImportFormatError(
                "No se encontraron citas válidas en el archivo. "
                f"Revisa el formato y las columnas ({', '.join(EXPECTED_COLUMNS)})."
            )

        created = self.appointment_repo.create_many(drafts)
        logger.info(
            "Bulk import completed",
            extra={
                "context": {
                    "total_rows": result.total,
                    "imported": len(created),
                    "rejected": len(result.rejected),
                    "skipped": len(skipped),
                }
            },
        )
        return len(created)

    def _to_domain(self, request: AppointmentCreateRequest, appointment_id=None) -> Appointment:
        try:
            return request.to_domain(appointment_id=appointment_id)
        except ValueError as e:
            raise ValidationError(str(e))

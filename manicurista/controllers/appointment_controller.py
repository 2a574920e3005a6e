"""
Appointment controller.

Handles HTTP concerns only; every mutation goes through AppointmentService
and every read view is computed by the calendar aggregator.
"""

import logging

from flask import Blueprint, request

from manicurista.controllers.controller_helpers import (
    appointment_to_dict,
    json_body,
    json_object,
    reference_date_arg,
)
from manicurista.core.api_utils import api_response
from manicurista.core.config import app_today
from manicurista.core.exceptions import ImportFormatError, ValidationError
from manicurista.core.limiter_config import limiter
from manicurista.domain.entities import AppointmentStatus
from manicurista.schemas.dtos import AppointmentCreateRequest, AppointmentUpdateRequest
from manicurista.services import calendar_service
from manicurista.state import get_state

logger = logging.getLogger(__name__)

appointment_bp = Blueprint("appointments", __name__, url_prefix="/api/appointments")


@appointment_bp.route("", methods=["GET"])
def list_appointments():
    """All appointments in ascending (date, time) order."""
    appointments = get_state().appointment_service.list_appointments()
    return api_response(
        True,
        "Appointments retrieved",
        [appointment_to_dict(a) for a in appointments],
    )


@appointment_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_appointment():
    payload = AppointmentCreateRequest.from_payload(json_object())
    created = get_state().appointment_service.create_appointment(payload)
    return api_response(True, "Appointment created", appointment_to_dict(created), 201)


@appointment_bp.route("/<int:appointment_id>", methods=["GET"])
def get_appointment(appointment_id: int):
    appointment = get_state().appointment_service.get_appointment(appointment_id)
    return api_response(True, "Appointment found", appointment_to_dict(appointment))


@appointment_bp.route("/<int:appointment_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_appointment(appointment_id: int):
    payload = AppointmentUpdateRequest.from_payload(json_object())
    updated = get_state().appointment_service.update_appointment(appointment_id, payload)
    return api_response(True, "Appointment updated", appointment_to_dict(updated))


@appointment_bp.route("/<int:appointment_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_appointment(appointment_id: int):
    deleted = get_state().appointment_service.delete_appointment(appointment_id)
    message = "Appointment deleted" if deleted else "Appointment not found, nothing deleted"
    return api_response(True, message, {"deleted": deleted})


@appointment_bp.route("/calendar", methods=["GET"])
def weekly_calendar():
    """Sunday-start week containing ?date=, one bucket per day."""
    reference = reference_date_arg()
    week = calendar_service.week_of(reference)
    buckets = calendar_service.bucket_by_day(
        get_state().appointment_service.list_appointments(), week
    )
    data = {
        "weekStart": week[0].isoformat(),
        "weekEnd": week[-1].isoformat(),
        "days": [
            {
                "date": bucket.date.isoformat(),
                "label": bucket.label,
                "appointments": [appointment_to_dict(a) for a in bucket.appointments],
            }
            for bucket in buckets
        ],
    }
    return api_response(True, "Weekly calendar", data)


@appointment_bp.route("/upcoming", methods=["GET"])
def upcoming_appointments():
    appointments = calendar_service.upcoming(
        get_state().appointment_service.list_appointments(), app_today()
    )
    return api_response(
        True, "Upcoming appointments", [appointment_to_dict(a) for a in appointments]
    )


@appointment_bp.route("/history", methods=["GET"])
def appointment_history():
    """History, most recent first. ?status= takes a status label or "All"."""
    status_filter = request.args.get("status", AppointmentStatus.COMPLETED.value)
    appointments = calendar_service.history(
        get_state().appointment_service.list_appointments(), status_filter
    )
    return api_response(
        True, "Appointment history", [appointment_to_dict(a) for a in appointments]
    )


@appointment_bp.route("/service-options", methods=["GET"])
def service_options():
    return api_response(
        True, "Service options", get_state().settings_service.service_options()
    )


@appointment_bp.route("/import", methods=["POST"])
@limiter.limit("10 per minute")
def import_appointments():
    """Bulk import from an uploaded spreadsheet (field "file") or a JSON row array."""
    state = get_state()

    if "file" in request.files:
        upload = request.files["file"]
        rows = state.spreadsheet_reader.read_rows(upload.read())
        source = upload.filename or "upload"
    else:
        data = json_body()
        rows = data.get("rows") if isinstance(data, dict) else data
        if not isinstance(rows, list):
            raise ValidationError("Expected a JSON array of rows", field="rows")
        source = "json"

    if not rows:
        return api_response(True, "No hay datos para importar.", {"imported": 0, "totalRows": 0})

    try:
        imported = state.appointment_service.bulk_import(rows)
    except ImportFormatError:
        logger.warning(
            "Import rejected",
            extra={"context": {"source": source, "rows": len(rows)}},
        )
        raise

    return api_response(
        True,
        "¡Citas importadas exitosamente!",
        {"imported": imported, "totalRows": len(rows)},
        201,
    )

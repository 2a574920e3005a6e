"""
Shared helpers for the JSON API controllers.
"""

from datetime import date
from typing import Any, Dict

from flask import request

from manicurista.core.config import app_today
from manicurista.core.exceptions import ValidationError
from manicurista.domain.entities import Appointment
from manicurista.schemas.dtos import AppointmentResponse
from manicurista.utils.datetime_utils import parse_date


def json_body() -> Any:
    """Parsed JSON body of the current request; raises ValidationError if missing."""
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Request body must be valid JSON")
    return data


def json_object() -> Dict[str, Any]:
    data = json_body()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def reference_date_arg(name: str = "date") -> date:
    """Date query parameter (YYYY-MM-DD), defaulting to today in the app timezone."""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return app_today()
    parsed = parse_date(raw)
    if parsed is None:
        raise ValidationError(f"Invalid {name} parameter, expected YYYY-MM-DD", field=name)
    return parsed


def appointment_to_dict(appointment: Appointment) -> Dict[str, Any]:
    return AppointmentResponse.from_domain(appointment).to_dict()

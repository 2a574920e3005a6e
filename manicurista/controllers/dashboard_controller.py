"""
Dashboard controller: revenue series, status counts and weekly birthdays.
"""

from flask import Blueprint, request

from manicurista.controllers.controller_helpers import reference_date_arg
from manicurista.core.api_utils import api_response
from manicurista.schemas.dtos import client_to_dict
from manicurista.services import calendar_service, revenue_service
from manicurista.state import get_state

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


def _series_to_dict(series: revenue_service.RevenueSeries) -> dict:
    return {
        "window": series.window.value,
        "referenceDate": series.reference_date.isoformat(),
        "points": [{"label": p.label, "amount": p.amount} for p in series.points],
        "total": series.total,
    }


@dashboard_bp.route("", methods=["GET"])
def dashboard():
    state = get_state()
    summary = revenue_service.dashboard_summary(
        state.appointment_service.list_appointments(),
        state.client_service.list_clients(),
        state.settings_service.get_prices(),
        request.args.get("window", revenue_service.RevenueWindow.WEEK.value),
        reference_date_arg(),
    )
    data = {
        "revenue": _series_to_dict(summary.revenue),
        "completedCount": summary.completed_count,
        "newClientsCount": summary.new_clients_count,
        "statusDistribution": summary.status_distribution,
        "birthdays": [client_to_dict(c) for c in summary.birthdays],
    }
    return api_response(True, "Dashboard summary", data)


@dashboard_bp.route("/revenue", methods=["GET"])
def revenue():
    """Revenue for ?window=day|week|month around ?date= (default today)."""
    state = get_state()
    series = revenue_service.revenue(
        state.appointment_service.list_appointments(),
        state.settings_service.get_prices(),
        request.args.get("window", revenue_service.RevenueWindow.WEEK.value),
        reference_date_arg(),
    )
    return api_response(True, "Revenue", _series_to_dict(series))


@dashboard_bp.route("/status-distribution", methods=["GET"])
def status_distribution():
    distribution = revenue_service.status_distribution(
        get_state().appointment_service.list_appointments()
    )
    return api_response(True, "Status distribution", distribution)


@dashboard_bp.route("/birthdays", methods=["GET"])
def birthdays():
    week = calendar_service.week_of(reference_date_arg())
    clients = revenue_service.birthdays_in_week(
        get_state().client_service.list_clients(), week
    )
    return api_response(
        True, "Birthdays this week", [client_to_dict(c) for c in clients]
    )

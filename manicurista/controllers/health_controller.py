"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, jsonify

from manicurista.state import get_state

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health_check():
    """
    Report that the service is up, with a snapshot of in-memory state.

    Returns:
        JSON response with:
        - status: always "healthy" while the process serves requests
        - text_generation: "configured" when an API key is available
        - appointments / clients / products: collection sizes

    Status codes:
        200: Always (a missing API key degrades features, not the service)
    """
    state = get_state()
    text_generation = (
        "configured" if state.text_generator.is_configured() else "not_configured"
    )
    data = {
        "status": "healthy",
        "text_generation": text_generation,
        "appointments": len(state.appointment_service.list_appointments()),
        "clients": len(state.client_service.list_clients()),
        "products": len(state.inventory_service.list_products()),
    }
    logger.debug("Health check", extra={"context": data})
    return jsonify(data), 200

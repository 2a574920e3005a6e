"""
Client controller for handling HTTP requests.
"""

from flask import Blueprint

from manicurista.controllers.controller_helpers import appointment_to_dict, json_object
from manicurista.core.api_utils import api_response
from manicurista.core.limiter_config import limiter
from manicurista.schemas.dtos import ClientRequest, client_to_dict
from manicurista.state import get_state

client_bp = Blueprint("clients", __name__, url_prefix="/api/clients")


@client_bp.route("", methods=["GET"])
def list_clients():
    clients = get_state().client_service.list_clients()
    return api_response(True, "Clients retrieved", [client_to_dict(c) for c in clients])


@client_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_client():
    client = get_state().client_service.add_client(
        ClientRequest.from_payload(json_object())
    )
    return api_response(True, "Client created", client_to_dict(client), 201)


@client_bp.route("/<int:client_id>", methods=["GET"])
def get_client(client_id: int):
    client = get_state().client_service.get_client(client_id)
    return api_response(True, "Client found", client_to_dict(client))


@client_bp.route("/<int:client_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_client(client_id: int):
    client = get_state().client_service.update_client(
        client_id, ClientRequest.from_payload(json_object())
    )
    return api_response(True, "Client updated", client_to_dict(client))


@client_bp.route("/<int:client_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_client(client_id: int):
    deleted = get_state().client_service.delete_client(client_id)
    message = "Client deleted" if deleted else "Client not found, nothing deleted"
    return api_response(True, message, {"deleted": deleted})


@client_bp.route("/<int:client_id>/appointments", methods=["GET"])
def client_appointments(client_id: int):
    """Appointments booked under this client's name."""
    appointments = get_state().client_service.appointments_for(client_id)
    return api_response(
        True, "Client appointments", [appointment_to_dict(a) for a in appointments]
    )

"""
Marketing and assistant controllers.

Both call the text-generation collaborator, so they share the stricter
rate limit.
"""

from flask import Blueprint

from manicurista.controllers.controller_helpers import json_object
from manicurista.core.api_utils import api_response
from manicurista.core.config import app_today
from manicurista.core.limiter_config import TEXT_GENERATION_LIMIT, limiter
from manicurista.schemas.dtos import MarketingMessageRequest
from manicurista.state import get_state

marketing_bp = Blueprint("marketing", __name__, url_prefix="/api/marketing")
assistant_bp = Blueprint("assistant", __name__, url_prefix="/api/assistant")


@marketing_bp.route("/messages", methods=["POST"])
@limiter.limit(TEXT_GENERATION_LIMIT)
def generate_marketing_message():
    """Generate a reminder, promotion or birthday message for a client."""
    payload = MarketingMessageRequest.from_payload(json_object())
    message = get_state().marketing_service.generate_message(payload, app_today())
    return api_response(
        True, "Message generated", {"type": payload.message_type, "message": message}
    )


@assistant_bp.route("/messages", methods=["POST"])
@limiter.limit(TEXT_GENERATION_LIMIT)
def assistant_reply():
    """Reply to {"messages": [{sender, text}, ...]} as Kandy."""
    data = json_object()
    text = get_state().assistant_service.reply(data.get("messages"), app_today())
    return api_response(True, "Assistant reply", {"sender": "kandy", "text": text})

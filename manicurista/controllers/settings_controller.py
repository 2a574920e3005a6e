"""
Settings controller: salon profile, price table and theme preference.
"""

import logging

from flask import Blueprint, session

from manicurista.controllers.controller_helpers import json_object
from manicurista.core.api_utils import api_response
from manicurista.core.limiter_config import limiter
from manicurista.schemas.dtos import profile_to_dict
from manicurista.services.settings_service import resolve_theme, validate_theme
from manicurista.state import get_state

logger = logging.getLogger(__name__)

settings_bp = Blueprint("settings", __name__, url_prefix="/api/settings")

THEME_SESSION_KEY = "theme"


@settings_bp.route("/profile", methods=["GET"])
def get_profile():
    return api_response(
        True, "Profile", profile_to_dict(get_state().settings_service.get_profile())
    )


@settings_bp.route("/profile", methods=["PUT"])
@limiter.limit("30 per minute")
def update_profile():
    data = json_object()
    profile = get_state().settings_service.update_profile(
        data.get("salonName"), data.get("ownerName")
    )
    return api_response(True, "Profile updated", profile_to_dict(profile))


@settings_bp.route("/prices", methods=["GET"])
def get_prices():
    return api_response(True, "Prices", get_state().settings_service.get_prices())


@settings_bp.route("/prices", methods=["PUT"])
@limiter.limit("30 per minute")
def update_prices():
    """Replace the whole price table with {"service": price, ...}."""
    prices = get_state().settings_service.update_prices(json_object())
    return api_response(True, "Prices updated", prices)


@settings_bp.route("/theme", methods=["GET"])
def get_theme():
    return api_response(True, "Theme", {"theme": resolve_theme(session.get(THEME_SESSION_KEY))})


@settings_bp.route("/theme", methods=["PUT"])
def update_theme():
    theme = validate_theme(json_object().get("theme"))
    session[THEME_SESSION_KEY] = theme
    logger.debug("Theme preference stored", extra={"context": {"theme": theme}})
    return api_response(True, "Theme updated", {"theme": theme})

# Controllers package: one Flask blueprint per API area.

from .appointment_controller import appointment_bp
from .client_controller import client_bp
from .dashboard_controller import dashboard_bp
from .health_controller import health_bp
from .inventory_controller import inventory_bp
from .marketing_controller import assistant_bp, marketing_bp
from .settings_controller import settings_bp

__all__ = [
    "appointment_bp",
    "assistant_bp",
    "client_bp",
    "dashboard_bp",
    "health_bp",
    "inventory_bp",
    "marketing_bp",
    "settings_bp",
]

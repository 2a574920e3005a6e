"""
Salon settings: profile, price table and theme preference.

The price table also defines the service options offered when booking.
"""

import logging
import math
import numbers
from typing import Any, Dict, List

from manicurista.core.exceptions import ValidationError
from manicurista.domain.entities import Prices, Profile

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
SYSTEM_THEME = "system"


class SettingsService:
    """Holds the salon profile and price table for the process lifetime."""

    def __init__(self, profile: Profile, prices: Prices):
        self._profile = profile
        self._prices: Prices = dict(prices)

    def get_profile(self) -> Profile:
        return Profile(self._profile.salon_name, self._profile.owner_name)

    def update_profile(self, salon_name: Any, owner_name: Any) -> Profile:
        if not isinstance(salon_name, str) or not salon_name.strip():
            raise ValidationError("Salon name is required", field="salonName")
        if not isinstance(owner_name, str) or not owner_name.strip():
            raise ValidationError("Owner name is required", field="ownerName")
        self._profile = Profile(salon_name, owner_name)
        logger.info(
            "Profile updated",
            extra={"context": {"salon_name": self._profile.salon_name}},
        )
        return self.get_profile()

    def get_prices(self) -> Prices:
        return dict(self._prices)

    def update_prices(self, mapping: Any) -> Prices:
        """Replace the whole price table. Every price must be a non-negative number."""
        if not isinstance(mapping, dict):
            raise ValidationError("Prices must be an object of service -> price", field="prices")

        prices: Dict[str, float] = {}
        for service, price in mapping.items():
            name = str(service).strip()
            if not name:
                raise ValidationError("Service names cannot be empty", field="prices")
            if isinstance(price, bool) or not isinstance(price, numbers.Real):
                raise ValidationError(f"Price for '{name}' must be a number", field=name)
            if not math.isfinite(price):
                raise ValidationError(f"Price for '{name}' must be a finite number", field=name)
            if price < 0:
                raise ValidationError(f"Price for '{name}' cannot be negative", field=name)
            prices[name] = float(price)

        self._prices = prices
        logger.info(
            "Prices updated", extra={"context": {"services": list(prices.keys())}}
        )
        return self.get_prices()

    def service_options(self) -> List[str]:
        return list(self._prices.keys())


def resolve_theme(value: Any) -> str:
    """Return the stored theme, falling back to following the system."""
    return value if value in THEMES else SYSTEM_THEME


def validate_theme(value: Any) -> str:
    if value not in THEMES:
        raise ValidationError(
            f"Theme must be one of: {', '.join(THEMES)}", field="theme"
        )
    return value

"""Manicurista Pro: salon management backend (appointments, clients, inventory, marketing)."""

__version__ = "1.0.0"

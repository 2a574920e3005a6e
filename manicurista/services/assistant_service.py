"""
Kandy AI, the salon's conversational assistant.

Each reply sends the whole conversation plus a system instruction that
summarises the current salon state, so answers reflect the latest data.
"""

import logging
from datetime import date
from typing import Any, Dict, List

from manicurista.core.exceptions import TextGenerationError, ValidationError
from manicurista.domain.interfaces import (
    IAppointmentReader,
    IClientReader,
    IInventoryReader,
    ITextGenerator,
)
from manicurista.services.calendar_service import upcoming
from manicurista.services.marketing_service import CONFIG_MISSING_MESSAGE
from manicurista.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = "Lo siento, ocurrió un error. Por favor intenta de nuevo."
SENDERS = ("user", "kandy")


def validate_history(history: Any) -> List[Dict[str, str]]:
    """Check the conversation shape; the last message must be a user question."""
    if not isinstance(history, list) or not history:
        raise ValidationError("Messages must be a non-empty list", field="messages")

    messages = []
    for index, message in enumerate(history):
        if not isinstance(message, dict):
            raise ValidationError(f"Message {index} must be an object", field="messages")
        sender = message.get("sender")
        text = message.get("text")
        if sender not in SENDERS:
            raise ValidationError(
                f"Message {index} sender must be one of: {', '.join(SENDERS)}",
                field="messages",
            )
        if not isinstance(text, str):
            raise ValidationError(f"Message {index} text must be a string", field="messages")
        messages.append({"sender": sender, "text": text})

    if messages[-1]["sender"] != "user" or not messages[-1]["text"].strip():
        raise ValidationError(
            "The last message must be a non-empty user message", field="messages"
        )
    return messages


class AssistantService:
    def __init__(
        self,
        text_generator: ITextGenerator,
        appointment_repo: IAppointmentReader,
        client_repo: IClientReader,
        inventory_repo: IInventoryReader,
        settings_service: SettingsService,
    ):
        self.text_generator = text_generator
        self.appointment_repo = appointment_repo
        self.client_repo = client_repo
        self.inventory_repo = inventory_repo
        self.settings_service = settings_service

    def build_system_instruction(self, today: date) -> str:
        profile = self.settings_service.get_profile()
        prices = self.settings_service.get_prices()

        appointment_lines = [
            f"- {a.date.isoformat()} {a.time}: {a.client_name} ({', '.join(a.services)}) [{a.status.value}]"
            for a in upcoming(self.appointment_repo.list_all(), today)
        ]
        client_lines = [
            f"- {c.name}"
            + (f", cumpleaños {c.birth_date.isoformat()}" if c.birth_date else "")
            + (f", preferencias: {c.preferences}" if c.preferences else "")
            for c in self.client_repo.get_all()
        ]
        product_lines = [
            f"- {p.name}: {p.current_stock} unidades (mínimo {p.min_stock})"
            + (" STOCK BAJO" if p.is_low_stock else "")
            for p in self.inventory_repo.get_all()
        ]
        price_lines = [f"- {service}: {price:g}" for service, price in prices.items()]

        sections = [
            f'Eres Kandy, la asistente virtual del salón de manicura "{profile.salon_name}", '
            f"propiedad de {profile.owner_name}. Responde siempre en español, de forma "
            "breve, amable y útil, usando solo los datos proporcionados.",
            f"Fecha de hoy: {today.isoformat()}",
            "Próximas citas:\n" + ("\n".join(appointment_lines) or "- Ninguna"),
            "Clientes:\n" + ("\n".join(client_lines) or "- Ninguno"),
            "Inventario:\n" + ("\n".join(product_lines) or "- Vacío"),
            "Precios:\n" + ("\n".join(price_lines) or "- Sin precios"),
        ]
        return "\n\n".join(sections)

    def reply(self, history: Any, today: date) -> str:
        messages = validate_history(history)

        if not self.text_generator.is_configured():
            logger.warning("Assistant called without text-generation credentials")
            return CONFIG_MISSING_MESSAGE

        system_instruction = self.build_system_instruction(today)
        try:
            text = self.text_generator.generate(
                history=messages, system_instruction=system_instruction
            ).strip()
        except Exception as e:
            logger.error(
                "Assistant reply failed",
                extra={"context": {"messages": len(messages), "error": str(e)}},
                exc_info=not isinstance(e, TextGenerationError),
            )
            return FALLBACK_MESSAGE

        logger.info(
            "Assistant reply generated",
            extra={"context": {"messages": len(messages), "chars": len(text)}},
        )
        return text

"""
Marketing message generation.

Builds a Spanish WhatsApp-style prompt for a client and hands it to the
text-generation collaborator. Remote failures never propagate: they are
turned into a localized fallback message.
"""

import logging
from datetime import date

from manicurista.core.exceptions import TextGenerationError, ValidationError
from manicurista.domain.entities import Appointment, Client
from manicurista.domain.interfaces import IAppointmentReader, ITextGenerator
from manicurista.schemas.dtos import MarketingMessageRequest
from manicurista.services.calendar_service import next_appointment_for
from manicurista.services.client_service import ClientService
from manicurista.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

CONFIG_MISSING_MESSAGE = (
    "Error: La clave API de Gemini no está configurada. "
    "Por favor, configura la variable de entorno API_KEY."
)
GENERATION_FAILED_MESSAGE = (
    "Hubo un error al generar el mensaje. Por favor, inténtalo de nuevo."
)
BIRTHDAY_DISCOUNT_PERCENT = 20


def reminder_prompt(salon_name: str, client: Client, appointment: Appointment) -> str:
    return f"""Actúa como un asistente amigable de un salón de manicura llamado "{salon_name}".
Escribe un recordatorio de cita corto y alegre para WhatsApp.

Detalles del cliente:
- Nombre: {client.name}

Detalles de la cita:
- Fecha: {appointment.date.isoformat()}
- Hora: {appointment.time}
- Servicios: {", ".join(appointment.services)}

Instrucciones:
- Saluda al cliente por su nombre.
- Recuérdale su próxima cita.
- Menciona la fecha y la hora.
- Termina con un tono amigable, como "¡Estamos emocionados de verte!".
- Mantén el mensaje por debajo de 50 palabras."""


def promotion_prompt(salon_name: str, client: Client, promotion: str) -> str:
    return f"""Actúa como un asistente de marketing entusiasta de un salón de manicura llamado "{salon_name}".
Escribe un mensaje promocional corto y atractivo para WhatsApp.

Detalles del cliente:
- Nombre: {client.name}

Detalles de la promoción:
- Oferta: "{promotion}"

Instrucciones:
- Saluda al cliente por su nombre.
- Preséntale la promoción especial de una manera emocionante.
- Crea un sentido de urgencia o exclusividad (ej. "oferta por tiempo limitado", "solo para nuestros clientes valiosos").
- Anímale a reservar una cita para aprovechar la oferta.
- Mantén el mensaje por debajo de 60 palabras."""


def birthday_prompt(salon_name: str, client: Client) -> str:
    return f"""Actúa como un asistente amigable y entusiasta de un salón de manicura llamado "{salon_name}".
Escribe un mensaje de cumpleaños muy alegre y festivo para WhatsApp.

Detalles del cliente:
- Nombre: {client.name}

Instrucciones:
- Saluda al cliente por su nombre y deséale un muy feliz cumpleaños.
- Como regalo especial por su día, ofrécele un {BIRTHDAY_DISCOUNT_PERCENT}% de descuento en su próximo servicio.
- Anímale a reservar una cita para celebrar y usar su descuento.
- Usa un tono muy festivo y personal.
- Mantén el mensaje por debajo de 60 palabras."""


class MarketingService:
    """Generates reminder, promotion and birthday messages for a client."""

    def __init__(
        self,
        text_generator: ITextGenerator,
        client_service: ClientService,
        appointment_repo: IAppointmentReader,
        settings_service: SettingsService,
    ):
        self.text_generator = text_generator
        self.client_service = client_service
        self.appointment_repo = appointment_repo
        self.settings_service = settings_service

    def build_prompt(self, request: MarketingMessageRequest, today: date) -> str:
        """Validate the request against current state and render its prompt."""
        request.validate()
        client = self.client_service.get_client(request.client_id)
        salon_name = self.settings_service.get_profile().salon_name

        if request.message_type == "reminder":
            appointment = next_appointment_for(
                self.appointment_repo.list_all(), client.name, today
            )
            if appointment is None:
                raise ValidationError(
                    "Este cliente no tiene citas próximas para recordar.",
                    field="clientId",
                )
            return reminder_prompt(salon_name, client, appointment)
        if request.message_type == "promotion":
            return promotion_prompt(salon_name, client, request.promotion.strip())
        return birthday_prompt(salon_name, client)

    def generate_message(self, request: MarketingMessageRequest, today: date) -> str:
        prompt = self.build_prompt(request, today)

        if not self.text_generator.is_configured():
            logger.warning(
                "Marketing message requested without text-generation credentials",
                extra={"context": {"type": request.message_type}},
            )
            return CONFIG_MISSING_MESSAGE

        try:
            message = self.text_generator.generate(prompt=prompt, temperature=0.7).strip()
        except Exception as e:
            logger.error(
                "Marketing message generation failed",
                extra={
                    "context": {
                        "type": request.message_type,
                        "client_id": request.client_id,
                        "error": str(e),
                    }
                },
                exc_info=not isinstance(e, TextGenerationError),
            )
            return GENERATION_FAILED_MESSAGE

        logger.info(
            "Marketing message generated",
            extra={
                "context": {"type": request.message_type, "client_id": request.client_id}
            },
        )
        return message

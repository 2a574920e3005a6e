"""
Gemini text-generation repository.
Single Responsibility: call the Gemini generateContent REST endpoint.
"""

import logging
from typing import Callable, Dict, List, Optional

import requests

from manicurista.core.config import get_gemini_api_key, get_gemini_model, get_gemini_timeout
from manicurista.core.exceptions import TextGenerationError
from manicurista.domain.interfaces import ITextGenerator

logger = logging.getLogger(__name__)

# Assistant replies are sent back to the API with the "model" role
SENDER_ROLES = {"user": "user", "kandy": "model"}


class GeminiTextGenerator(ITextGenerator):
    """
    Text generator backed by the Gemini REST API.
    Any transport, HTTP or payload problem surfaces as TextGenerationError.
    """

    def __init__(
        self,
        api_key_provider: Callable[[], Optional[str]] = get_gemini_api_key,
        model: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.base_url = "https://generativelanguage.googleapis.com/v1beta"
        self._api_key_provider = api_key_provider
        self.model = model or get_gemini_model()
        self.timeout = timeout or get_gemini_timeout()

    def is_configured(self) -> bool:
        return bool(self._api_key_provider())

    def generate(
        self,
        prompt: Optional[str] = None,
        history: Optional[List[Dict[str, str]]] = None,
        system_instruction: Optional[str] = None,
        temperature: float = 0.7,
    ) -> str:
        api_key = self._api_key_provider()
        if not api_key:
            raise TextGenerationError("Gemini API key is not configured")

        payload = {
            "contents": self._build_contents(prompt, history),
            "generationConfig": {"temperature": temperature},
        }
        if system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}

        url = f"{self.base_url}/models/{self.model}:generateContent"
        try:
            response = requests.post(
                url,
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": api_key,
                },
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(
                "Request error calling Gemini",
                extra={"context": {"model": self.model, "error": str(e)}},
            )
            raise TextGenerationError(f"Request to Gemini failed: {e}") from e

        if response.status_code != 200:
            logger.error(
                "Gemini API error",
                extra={
                    "context": {
                        "model": self.model,
                        "status_code": response.status_code,
                        "body": response.text[:500],
                    }
                },
            )
            raise TextGenerationError(
                f"Gemini API returned status {response.status_code}"
            )

        text = self._extract_text(response)
        logger.info(
            "Gemini response received",
            extra={"context": {"model": self.model, "chars": len(text)}},
        )
        return text

    @staticmethod
    def _build_contents(
        prompt: Optional[str], history: Optional[List[Dict[str, str]]]
    ) -> List[dict]:
        if history:
            return [
                {
                    "role": SENDER_ROLES.get(message.get("sender"), "user"),
                    "parts": [{"text": message.get("text", "")}],
                }
                for message in history
            ]
        if prompt:
            return [{"role": "user", "parts": [{"text": prompt}]}]
        raise TextGenerationError("Either a prompt or a message history is required")

    @staticmethod
    def _extract_text(response) -> str:
        try:
            data = response.json()
            parts = data["candidates"][0]["content"]["parts"]
            if not isinstance(parts, list) or not all(isinstance(p, dict) for p in parts):
                raise TextGenerationError("Gemini response parts are not a list of objects")
            text = "".join(str(part.get("text") or "") for part in parts).strip()
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            raise TextGenerationError("Unexpected Gemini response format") from e

        if not text:
            raise TextGenerationError("Gemini returned an empty response")
        return text

"""Gemini client for the suggestion flows, built on the ``google-genai`` SDK."""

import os
from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..config.defaults import SuggestionParams
from ..errors import SuggestionUnavailableError
from ..logging.config import get_suggestion_logger

logger = get_suggestion_logger(__name__)

SAFETY_CATEGORIES = (
    "HARM_CATEGORY_DANGEROUS_CONTENT",
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
)


class GenerativeModelClient:
    """Sends a prompt and returns the model's JSON text response."""

    def __init__(self, params: Optional[SuggestionParams] = None,
                 client: Optional[genai.Client] = None):
        self.params = params or SuggestionParams()
        self._client = client

    @property
    def api_key(self) -> str:
        return self.params.api_key or os.environ.get(self.params.api_key_env, "")

    def _get_client(self, flow: str) -> genai.Client:
        if self._client is None:
            api_key = self.api_key
            if not api_key:
                raise SuggestionUnavailableError(
                    f"No API key configured (set {self.params.api_key_env})", flow=flow
                )
            self._client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(
                    base_url=self.params.endpoint,
                    timeout=int(self.params.timeout_seconds * 1000),
                ),
            )
        return self._client

    def build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            safety_settings=[
                types.SafetySetting(category=category, threshold=self.params.safety_threshold)
                for category in SAFETY_CATEGORIES
            ],
        )

    def generate(self, prompt: str, flow: str = "") -> str:
        """
        Run one generation request.

        Returns:
            The response text

        Raises:
            SuggestionUnavailableError: On a missing key, an API or network
                failure, or a response without usable text
        """
        client = self._get_client(flow)

        try:
            response = client.models.generate_content(
                model=self.params.model,
                contents=prompt,
                config=self.build_config(),
            )
        except genai_errors.APIError as e:
            logger.warning("Model request API error", flow=flow, status_code=e.code, error=str(e))
            raise SuggestionUnavailableError(
                f"AI service error ({e.code})", flow=flow, status_code=e.code
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Model request failed", flow=flow, error=str(e))
            raise SuggestionUnavailableError(f"Network error: {e}", flow=flow) from e

        text = response.text
        if not text or not text.strip():
            # Blocked prompts come back without candidates
            feedback = response.prompt_feedback
            block_reason = feedback.block_reason if feedback is not None else None
            reason = str(getattr(block_reason, "value", block_reason) or "")
            logger.warning("Model returned no text", flow=flow, block_reason=reason or None)
            raise SuggestionUnavailableError(
                "AI failed to generate a response" + (f" ({reason})" if reason else ""),
                flow=flow
            )
        return text

# app/clients/ai_client.py

from logging import getLogger
from typing import NoReturn

from google.genai import Client
from google.genai.client import AsyncClient
from google.genai.types import GenerateContentConfig, HttpOptions
from httpx import RemoteProtocolError, TimeoutException

from app.configs import file_logger, settings
from app.decorators import with_retry
from app.errors import (
    AiAuthenticationError,
    AiConfigurationError,
    AiError,
    AIGenerationError,
    AiNetworkError,
    AiQuotaExceededError,
)

logger = file_logger(getLogger(__name__))

# Network-related exceptions that should be caught and converted
NETWORK_EXCEPTIONS = (
    RemoteProtocolError,
    TimeoutException,
    ConnectionError,
    OSError,
)


class AiClient:
    """
    Async client for the hosted text-generation model.

    Attributes:
        client: The Google GenAI AsyncClient instance, None without an API key.
        model_name: The name of the model to use.
    """

    def __init__(self) -> None:
        """Initialize the AI client with API credentials."""
        self._model = settings.AI_MODEL
        self._max_output_tokens = settings.AI_MAX_OUTPUT_TOKENS
        self._temperature = settings.AI_TEMPERATURE
        self._client: AsyncClient | None = None

        if not settings.GEMINI_API_KEY:
            logger.warning("GEMINI_API_KEY is not set, AI summaries are disabled")
            return

        try:
            self._client = Client(
                api_key=settings.GEMINI_API_KEY,
                http_options=HttpOptions(timeout=settings.AI_REQUEST_TIMEOUT * 1000),
            ).aio
        except Exception as e:
            logger.exception(
                "Failed to initialize Gemini client, missing or invalid API key?",
            )
            self._handle_exception(e)

        logger.info(f"AIClient initialized with model: {self._model}")

    @property
    def client(self) -> AsyncClient | None:
        """Get the AI client instance."""
        return self._client

    @client.setter
    def client(self, value: AsyncClient | None) -> None:
        self._client = value

    @property
    def model_name(self) -> str:
        return self._model

    @with_retry()
    async def _generate_content(self, prompt: str, config: GenerateContentConfig) -> str:
        """
        Run one generation request.

        Args:
            prompt: The full prompt text.
            config: Sampling configuration.

        Returns:
            The generated text.

        Raises:
            AIGenerationError: If the model answers without text.
            AiNetworkError: On transport failures (retried).
        """
        if self._client is None:
            raise AiConfigurationError

        try:
            response = await self._client.models.generate_content(
                model=self._model,
                contents=prompt,
                config=config,
            )
        except NETWORK_EXCEPTIONS as e:
            error_msg = str(e)
            logger.exception(f"AI network error: {error_msg}")
            detail = f"AI service temporarily unavailable: {error_msg}"
            raise AiNetworkError(detail=detail) from e

        if not response or not response.text:
            msg = "Empty response from Gemini API"
            raise AIGenerationError(detail=msg)
        return response.text

    async def generate_text(self, prompt: str) -> str:
        """
        Generate text for a prompt with the configured token and temperature limits.

        Args:
            prompt: The full prompt text.

        Returns:
            The generated text.

        Raises:
            AiError: Any model failure, mapped to a specific subclass.
        """
        config = GenerateContentConfig(
            max_output_tokens=self._max_output_tokens,
            temperature=self._temperature,
        )
        try:
            return await self._generate_content(prompt, config)
        except AiError:
            raise
        except Exception as e:
            logger.exception("AI content generation failed")
            self._handle_exception(e)

    def _handle_exception(self, e: Exception) -> NoReturn:
        """Map generic exceptions to specific AiError."""
        error_msg = str(e)

        if "401" in error_msg or "unauthenticated" in error_msg.lower():
            detail = f"Authentication failed: {error_msg}"
            raise AiAuthenticationError(detail=detail) from e
        elif "429" in error_msg or "quota" in error_msg.lower():
            detail = f"Quota exceeded: {error_msg}"
            raise AiQuotaExceededError(detail=detail) from e
        elif "connection" in error_msg.lower():
            detail = f"Network error: {error_msg}"
            raise AiNetworkError(detail=detail) from e
        else:
            detail = f"An unexpected error occurred: {error_msg}"
            raise AiError(detail=detail) from e

    async def close(self) -> None:
        if self._client is None:
            return
        try:
            logger.info("Closing AI client")
            await self._client.aclose()
        except Exception:
            logger.exception("Failed to close AI client")
        else:
            logger.info("AI client closed successfully")

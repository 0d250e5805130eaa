"""
LLM API Client

Groq and OpenAI both expose the OpenAI chat-completions API, so one wrapper
over the openai library serves both:
- Groq:   interview question generation, resume analysis
- OpenAI: interview feedback, transcript analysis

Prompts always ask for strict JSON; responses are parsed here so services
only deal with dicts.
"""
import json
import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from app.core.config import get_settings
from app.core.errors import AIServiceError

logger = logging.getLogger(__name__)

settings = get_settings()


class LLMClient:
    """
    Thin wrapper around an OpenAI-compatible chat endpoint.
    """

    def __init__(self, api_key: str, base_url: str, model: str, provider: str):
        self.provider = provider
        self.model = model
        self.client = OpenAI(api_key=api_key, base_url=base_url)

    def _call_api(
        self,
        system_prompt: str,
        user_content: str,
        max_tokens: int = 1000,
        temperature: float = 0.5,
        json_mode: bool = True,
    ) -> str:
        """
        Internal method to call the chat completions API.
        Returns raw text response.
        """
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content}
                ],
                max_tokens=max_tokens,
                temperature=temperature,
                **kwargs
            )
        except OpenAIError as e:
            logger.error("%s API error: %s", self.provider, e)
            raise AIServiceError(f"{self.provider} request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise AIServiceError("No response from AI")
        return content

    @staticmethod
    def _extract_json(text: str) -> dict:
        """
        Extract JSON from API response.
        Handles cases where model wraps JSON in markdown code blocks.
        """
        text = text.strip()
        if text.startswith("```json"):
            text = text[7:]
        if text.startswith("```"):
            text = text[3:]
        if text.endswith("```"):
            text = text[:-3]

        try:
            return json.loads(text.strip())
        except json.JSONDecodeError as e:
            raise AIServiceError(f"AI returned invalid JSON: {e.msg}") from e

    def chat_json(
        self,
        system_prompt: str,
        user_content: str,
        max_tokens: int = 1000,
        temperature: float = 0.5,
    ) -> dict:
        """Call the model in JSON mode and return the parsed object."""
        raw = self._call_api(system_prompt, user_content, max_tokens=max_tokens, temperature=temperature)
        data = self._extract_json(raw)
        if not isinstance(data, dict):
            raise AIServiceError("AI returned JSON that is not an object")
        return data

    def test_connection(self) -> bool:
        """Test if the provider is reachable"""
        try:
            response = self._call_api(
                "You are a test assistant.",
                "Reply with exactly: OK",
                max_tokens=10,
                json_mode=False,
            )
            return "OK" in response.upper()
        except AIServiceError as e:
            logger.warning("%s connection failed: %s", self.provider, e)
            return False


# Singleton instances
_groq_client: Optional[LLMClient] = None
_openai_client: Optional[LLMClient] = None


def groq_configured() -> bool:
    return bool(settings.groq_api_key)


def openai_configured() -> bool:
    return bool(settings.openai_api_key)


def get_groq_client() -> LLMClient:
    """Get or create the Groq client (singleton pattern)"""
    global _groq_client
    if _groq_client is None:
        _groq_client = LLMClient(
            api_key=settings.groq_api_key,
            base_url=settings.groq_base_url,
            model=settings.groq_model,
            provider="Groq",
        )
    return _groq_client


def get_openai_client() -> LLMClient:
    """Get or create the OpenAI client (singleton pattern)"""
    global _openai_client
    if _openai_client is None:
        _openai_client = LLMClient(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.openai_feedback_model,
            provider="OpenAI",
        )
    return _openai_client

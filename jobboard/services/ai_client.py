"""
Generative AI Client

The provider is reached through its OpenAI-compatible API, so we use the
openai library. By default this is Google Gemini (gemini-1.5-flash).

AI is used ONLY for:
- Scoring a resume against a job description (ATS feedback)
- The career chat assistant

FAILURE POLICY:
- No credential -> ConfigurationError, raised before any network call
- Any SDK/provider failure -> ProviderError with the upstream message
- No retries (the SDK's own retries are disabled too)
"""
from typing import Any, Dict, Iterable, Optional

from openai import AsyncOpenAI, OpenAIError

from jobboard.core.config import Settings
from jobboard.core.errors import ConfigurationError, ProviderError
from jobboard.core.logging import get_logger
from jobboard.schemas.schemas import ChatTurn
from jobboard.services.feedback_parser import parse_feedback
from jobboard.services.prompts import build_resume_prompt, build_chat_prompt

logger = get_logger(__name__)


def first_completion_text(response: Any) -> str:
    """Text of the first choice, or "" when the reply carries none."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


class AIClient:
    """
    Wrapper for the generative AI provider.

    The SDK client is created lazily, after the credential check, so an
    unconfigured deployment never builds one.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self.model = settings.ai_model
        self._client = client

    @property
    def configured(self) -> bool:
        return self.settings.ai_configured

    def ensure_configured(self) -> None:
        """Raise ConfigurationError unless a credential is set."""
        if not self.configured:
            logger.error("GEMINI_API_KEY is not set.")
            raise ConfigurationError()

    def _get_client(self) -> AsyncOpenAI:
        self.ensure_configured()
        if self._client is None:
            options: Dict[str, Any] = {
                "api_key": self.settings.gemini_api_key,
                "base_url": self.settings.ai_base_url,
                "max_retries": 0,
            }
            if self.settings.ai_timeout_seconds is not None:
                options["timeout"] = self.settings.ai_timeout_seconds
            self._client = AsyncOpenAI(**options)
        return self._client

    async def generate(self, prompt: str) -> str:
        """
        Send a single prompt and return the raw text of the first completion.
        """
        client = self._get_client()
        logger.info(f"Calling AI model={self.model} prompt_chars={len(prompt)}")
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as e:
            logger.error(f"AI provider call failed: {e}")
            raise ProviderError(details=str(e)) from e
        return first_completion_text(response)

    async def analyze_resume(self, resume_text: str, job_description: str) -> Dict[str, Any]:
        """
        Score a resume against a job description.
        Always returns a feedback dict; unparseable replies give the fallback.
        """
        prompt = build_resume_prompt(resume_text, job_description)
        reply = await self.generate(prompt)
        return parse_feedback(reply)

    async def chat(self, message: Optional[str], history: Iterable[ChatTurn] = ()) -> str:
        """Continue a conversation; the reply text is returned verbatim."""
        prompt = build_chat_prompt(message, history)
        return await self.generate(prompt)

    async def test_connection(self) -> bool:
        """Test if the provider is reachable"""
        try:
            reply = await self.generate("Reply with exactly: OK")
            return "OK" in reply.upper()
        except (ConfigurationError, ProviderError) as e:
            logger.warning(f"AI connection test failed: {e}")
            return False

"""
Text Generation Client

Drafts job descriptions and polishes student bios through an
OpenAI-compatible chat API (DeepSeek by default), so we use the openai library.

Callers never see an exception: a failed request becomes a fixed apology
string (job descriptions) or the unchanged input (bios).
"""
from typing import Optional
from openai import OpenAI

from parttime_jobs.core.config import Settings, get_settings
from parttime_jobs.core.errors import GenerationFailure
from parttime_jobs.core.log import get_logger

log = get_logger(__name__)

MISSING_KEY_TEXT = "API key not configured. Please check your .env file."
EMPTY_DESCRIPTION_TEXT = "Failed to generate description."
DESCRIPTION_ERROR_TEXT = "Error generating description. Please try again."


class TextGenerationClient:
    """
    Wrapper for the chat completion API with short, bounded prompts.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.model = self.settings.text_generation_model
        self._client: Optional[OpenAI] = None

    @property
    def configured(self) -> bool:
        return bool(self.settings.text_generation_api_key)

    def _get_client(self) -> OpenAI:
        if not self.configured:
            raise GenerationFailure(MISSING_KEY_TEXT)
        if self._client is None:
            self._client = OpenAI(
                api_key=self.settings.text_generation_api_key,
                base_url=self.settings.text_generation_base_url
            )
        return self._client

    def _call_api(self, prompt: str, max_tokens: int = 300) -> str:
        """
        Internal method to call the API.
        Returns raw text response; any failure is raised as GenerationFailure.
        """
        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                temperature=0.7
            )
        except Exception as e:
            raise GenerationFailure(str(e)) from e
        return (response.choices[0].message.content or "").strip()

    def generate_job_description(self, title: str, company: str) -> str:
        """Short, engaging description for a part-time student role."""
        prompt = (
            f"Generate a short, engaging job description for a part-time student job: "
            f"{title} at {company}. Keep it under 100 words and mention that flexibility "
            f"is provided for students."
        )
        try:
            return self._call_api(prompt, max_tokens=250) or EMPTY_DESCRIPTION_TEXT
        except GenerationFailure as e:
            log.error("AI Generation Error: %s", e)
            if not self.configured:
                return MISSING_KEY_TEXT
            return DESCRIPTION_ERROR_TEXT

    def improve_bio(self, current_bio: str) -> str:
        """Rewrite a bio for employers; falls back to the original text."""
        prompt = (
            f'Improve this student bio for a part-time job application: "{current_bio}". '
            f"Make it professional yet approachable for employers looking for student help. "
            f"Keep it concise."
        )
        try:
            return self._call_api(prompt, max_tokens=200) or current_bio
        except GenerationFailure as e:
            log.error("AI Generation Error: %s", e)
            return current_bio

    def test_connection(self) -> bool:
        """Test if the API is reachable"""
        try:
            return "OK" in self._call_api("Reply with exactly: OK", max_tokens=10).upper()
        except GenerationFailure as e:
            log.error("Text generation connection failed: %s", e)
            return False


# Singleton instance
_text_client: TextGenerationClient = None


def get_text_client() -> TextGenerationClient:
    """Get or create text generation client (singleton pattern)"""
    global _text_client
    if _text_client is None:
        _text_client = TextGenerationClient()
    return _text_client

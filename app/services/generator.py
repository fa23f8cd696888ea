# app/services/generator.py
"""
Text-generation collaborator.

Everything the scoring core needs from a language model goes through
``TextGenerator.generate(prompt) -> str``. The Gemini implementation is
called with an explicit timeout; every failure (missing key, transport
error, timeout, blocked response) surfaces as ``GeneratorError`` so callers
can degrade instead of crashing.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional

from app.core.config import settings
from app.core.log import get_logger

log = get_logger(__name__)


class GeneratorError(RuntimeError):
    """The generator produced no usable text."""


class TextGenerator(ABC):
    name: str = "generator"

    @abstractmethod
    def generate(self, prompt: str) -> str:
        raise NotImplementedError


class GeminiGenerator(TextGenerator):
    """Google Generative AI (Gemini) via google-generativeai."""

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash", timeout: float = 60.0) -> None:
        import google.generativeai as genai

        genai.configure(api_key=api_key)
        self.model_name = model
        self.timeout = timeout
        self.name = f"gemini/{model}"
        self._model = genai.GenerativeModel(model)

    def generate(self, prompt: str) -> str:
        log.debug("Sending prompt to %s (%d chars)", self.name, len(prompt))
        try:
            response = self._model.generate_content(
                prompt, request_options={"timeout": self.timeout}
            )
            return response.text
        except Exception as exc:  # noqa: BLE001
            log.warning("%s call failed: %s", self.name, exc)
            raise GeneratorError(f"{self.name} call failed: {exc}") from exc


class UnconfiguredGenerator(TextGenerator):
    """Stand-in when no API key is set; every call fails cleanly."""

    name = "unconfigured"

    def generate(self, prompt: str) -> str:
        raise GeneratorError("No GEMINI_API_KEY/GOOGLE_API_KEY configured")


def build_generator(api_key: Optional[str], model: str, timeout: float) -> TextGenerator:
    if not api_key:
        log.warning("No Gemini API key configured; generator-backed routes will degrade")
        return UnconfiguredGenerator()
    return GeminiGenerator(api_key=api_key, model=model, timeout=timeout)


@lru_cache(maxsize=1)
def get_generator() -> TextGenerator:
    # FastAPI dependency; tests override it
    return build_generator(settings.gemini_api_key, settings.gemini_model, settings.llm_timeout_seconds)

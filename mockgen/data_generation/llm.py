"""
Text Generation
===============

The generator only needs ``generate(prompt) -> str``. The default
implementation calls Google Gemini through LangChain.
"""

import os
from typing import Protocol, runtime_checkable

from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.output_parsers import StrOutputParser

from mockgen.app.config import LLM_MODEL, LLM_TEMPERATURE


# =============================================================================
# EXCEPTIONS
# =============================================================================

class GenerationError(Exception):
    """Raised when the text generation call fails. Retryable."""
    pass


class LLMUnavailableError(GenerationError):
    """Raised when the LLM (Gemini) cannot be configured."""
    pass


# =============================================================================
# CONTRACT
# =============================================================================

@runtime_checkable
class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str:
        ...


# =============================================================================
# LANGCHAIN CONFIGURATION
# =============================================================================

def _get_llm(model: str = LLM_MODEL, temperature: float = LLM_TEMPERATURE) -> ChatGoogleGenerativeAI:
    """
    Initialize the Gemini LLM via LangChain.

    Raises:
        LLMUnavailableError: If GEMINI_API_KEY is not set or initialization fails.
    """
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        raise LLMUnavailableError(
            "GEMINI_API_KEY environment variable is not set. "
            "Set it before generating mock data."
        )

    try:
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,  # Some variety across batches
        )
    except Exception as e:
        raise LLMUnavailableError(f"Failed to initialize Gemini LLM: {e}")


class GeminiTextGenerator:
    """TextGenerator backed by ``ChatGoogleGenerativeAI``. No internal retries."""

    def __init__(self, model: str = LLM_MODEL, temperature: float = LLM_TEMPERATURE):
        self.model = model
        self.temperature = temperature
        self._chain = None

    def _get_chain(self):
        if self._chain is None:
            self._chain = _get_llm(self.model, self.temperature) | StrOutputParser()
        return self._chain

    def generate(self, prompt: str) -> str:
        chain = self._get_chain()
        try:
            return chain.invoke(prompt)
        except Exception as e:
            raise GenerationError(f"LLM call failed: {e}") from e


def get_text_generator() -> TextGenerator:
    """Default generator for the API layer."""
    return GeminiTextGenerator()

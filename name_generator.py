import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

import google.generativeai as genai
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_TIMEOUT = 30.0

EXTENSIONS = (".com", ".io", ".co", ".net", ".org", ".ai")

PROMPT_TEMPLATE = (
    "Generate 5 creative, memorable, and brandable website domain names based on this description: {description}. "
    "Consider SEO, memorability, and brand potential. Each name should be short, catchy, and unique. "
    "For each name, suggest multiple domain extensions (.com, .io, .co, .net, .org, .ai). "
    "Return only the domain names without extensions, one per line, without any additional text or explanations."
)

MISSING_KEY_MESSAGE = "API key not configured. Please add your Gemini API key to continue."


class NameGeneratorError(Exception):
    """Base class for failures while generating name suggestions."""


class ConfigurationError(NameGeneratorError):
    pass


class BackendError(NameGeneratorError):
    pass


@dataclass(frozen=True)
class Suggestion:
    name: str
    extensions: Tuple[str, ...] = EXTENSIONS


def build_prompt(description):
    return PROMPT_TEMPLATE.format(description=description)


def parse_suggestions(text) -> List[Suggestion]:
    """Turn the raw model reply into suggestions, one per non-blank line.

    Lines are lower-cased and otherwise kept as they are, so numbering or
    stray punctuation from the model passes through.
    """
    return [Suggestion(name=line.lower()) for line in text.splitlines() if line.strip()]


class GeminiBackend:
    """Text-in, text-out wrapper around a Gemini generative model."""

    def __init__(self, api_key, model_name=DEFAULT_MODEL, timeout=DEFAULT_TIMEOUT):
        if not api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        self.model_name = model_name
        self.timeout = timeout
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model_name)

    def generate(self, prompt: str) -> str:
        try:
            response = self.model.generate_content(prompt, request_options={"timeout": self.timeout})
            return response.text
        except Exception as e:
            raise BackendError(str(e)) from e


def _timeout_from_env():
    value = os.getenv("GEMINI_TIMEOUT", "")
    if not value:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid GEMINI_TIMEOUT {value!r}, using {DEFAULT_TIMEOUT} seconds")
        return DEFAULT_TIMEOUT


def create_backend(api_key=None, model_name=None, timeout=None) -> Optional[GeminiBackend]:
    """Build the Gemini backend from the environment, or None when no key is set."""
    api_key = api_key or os.getenv("GEMINI_API_KEY", "")
    if not api_key:
        logger.warning("GEMINI_API_KEY is not set; name generation is disabled")
        return None
    model_name = model_name or os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    if timeout is None:
        timeout = _timeout_from_env()
    logger.info(f"Gemini backend ready with model {model_name}")
    return GeminiBackend(api_key, model_name=model_name, timeout=timeout)


class NameGenerator:
    def __init__(self, backend=None):
        self.backend = backend

    @property
    def is_configured(self):
        return self.backend is not None

    def generate(self, description) -> List[Suggestion]:
        if not self.is_configured:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        logger.info(f"Requesting name ideas for a {len(description)}-character description")
        text = self.backend.generate(build_prompt(description))
        suggestions = parse_suggestions(text or "")
        logger.info(f"Parsed {len(suggestions)} name suggestions")
        return suggestions

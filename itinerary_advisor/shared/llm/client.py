"""
OpenAI client with retry logic.

Provides a cached client instance and ``generate``, the single entry
point used by the advisor and the search collaborators. Transient
failures are retried with tenacity; everything that still fails is
mapped onto GenerationError.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import openai
from openai import OpenAI
from pydantic import BaseModel, Field
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)
from dotenv import load_dotenv

from itinerary_advisor.shared.errors import ConfigurationError, GenerationError

load_dotenv()


logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
DEFAULT_MODEL = "gpt-4.1-mini"

# Module-level cache for OpenAI client
_client: Optional[OpenAI] = None


class GenerationOptions(BaseModel):
    """Sampling configuration for one chat completion."""

    temperature: float = Field(default=0.7, ge=0, le=2)
    max_output_tokens: int = Field(default=500, gt=0)
    presence_penalty: float = Field(default=0.0, ge=-2, le=2)
    frequency_penalty: float = Field(default=0.0, ge=-2, le=2)


def get_cached_client() -> OpenAI:
    """
    Returns a cached instance of the OpenAI client.

    Uses the OPENAI_API_KEY environment variable for authentication.
    The client is created once and reused for all subsequent calls.

    Raises:
        ConfigurationError: If the credential is not configured.
    """
    global _client
    if _client is None:
        api_key = os.environ.get(API_KEY_ENV)
        if not api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV} environment variable is not set. "
                "Please set it to your OpenAI API key."
            )
        # Retries are handled by tenacity in _create_completion
        _client = OpenAI(api_key=api_key, max_retries=0)
    return _client


def build_messages(instruction_text: str, data_text: str) -> List[Dict[str, str]]:
    """System message carries the rules, user message carries the data."""
    return [
        {"role": "system", "content": instruction_text},
        {"role": "user", "content": data_text},
    ]


@retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type(
        (openai.APIConnectionError, openai.RateLimitError, openai.InternalServerError)
    ),
    reraise=True,
)
def _create_completion(
    client: OpenAI,
    messages: List[Dict[str, str]],
    model: str,
    options: GenerationOptions,
    timeout: Optional[float],
) -> Any:
    return client.chat.completions.create(
        model=model,
        messages=messages,
        temperature=options.temperature,
        max_tokens=options.max_output_tokens,
        presence_penalty=options.presence_penalty,
        frequency_penalty=options.frequency_penalty,
        timeout=timeout,
    )


def _extract_usage(response: Any) -> Dict[str, int]:
    usage = getattr(response, "usage", None)
    if usage is None:
        return {"input_tokens": 0, "output_tokens": 0, "total_tokens": 0}
    return {
        "input_tokens": usage.prompt_tokens,
        "output_tokens": usage.completion_tokens,
        "total_tokens": usage.total_tokens,
    }


def generate_with_usage(
    instruction_text: str,
    data_text: str,
    options: Optional[GenerationOptions] = None,
    model: str = DEFAULT_MODEL,
    client: Optional[OpenAI] = None,
    timeout: Optional[float] = 60,
) -> Tuple[str, Dict[str, int]]:
    """
    Call the chat completion API and return the raw reply with token usage.

    The reply text is returned unmodified; cleanup is the parser's job.

    Args:
        instruction_text: System prompt with the rules to follow
        data_text: User prompt with the data to work on
        options: Sampling configuration (defaults to GenerationOptions())
        model: Model identifier to use
        client: Optional OpenAI client instance. If not provided, uses cached client.
        timeout: Per-request timeout in seconds

    Returns:
        Tuple of (raw reply text, usage dict with input/output/total tokens)

    Raises:
        ConfigurationError: If no credential is configured.
        GenerationError: If the backend fails or returns no usable text.
    """
    if options is None:
        options = GenerationOptions()
    if client is None:
        client = get_cached_client()

    messages = build_messages(instruction_text, data_text)

    try:
        response = _create_completion(client, messages, model, options, timeout)
    except openai.APITimeoutError as e:
        raise GenerationError("timeout", str(e)) from e
    except openai.APIStatusError as e:
        raise GenerationError("backend_rejected", _status_detail(e)) from e
    except openai.APIConnectionError as e:
        raise GenerationError("connection_failed", str(e)) from e
    except openai.APIError as e:
        raise GenerationError("backend_rejected", str(e)) from e

    choices = getattr(response, "choices", None) or []
    content = choices[0].message.content if choices else None
    if not content or not content.strip():
        raise GenerationError("empty_response", "The model returned no text")

    return content, _extract_usage(response)


def generate(
    instruction_text: str,
    data_text: str,
    options: Optional[GenerationOptions] = None,
    model: str = DEFAULT_MODEL,
    client: Optional[OpenAI] = None,
    timeout: Optional[float] = 60,
) -> str:
    """Same as ``generate_with_usage`` but returns only the raw reply."""
    content, _ = generate_with_usage(
        instruction_text,
        data_text,
        options=options,
        model=model,
        client=client,
        timeout=timeout,
    )
    return content


def _status_detail(error: "openai.APIStatusError") -> str:
    return f"HTTP {error.status_code}: {error.message}"

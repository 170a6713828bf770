"""Chat-completion API client for documentation generation.

Wraps the Azure OpenAI SDK (default) or the Anthropic SDK behind a
single ``generate`` call. Each call is exactly one request: failures
propagate to the caller, which records them per file.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import anthropic
from openai import AzureOpenAI

from src.utils.config import APIConfig

logger = logging.getLogger(__name__)

PROVIDER_AZURE_OPENAI = "azure_openai"
PROVIDER_ANTHROPIC = "anthropic"


@dataclass
class TokenUsage:
    """Token usage statistics for a single API call.

    Attributes:
        input_tokens: Number of tokens in the prompt.
        output_tokens: Number of tokens in the response.
    """

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        """Total tokens consumed."""
        return self.input_tokens + self.output_tokens


@dataclass
class GenerationResult:
    """Result of an LLM generation call.

    Attributes:
        content: The generated text, or None when the response had none.
        usage: Token usage statistics.
        model: Model that produced the result.
        finish_reason: Reason the generation stopped.
    """

    content: Optional[str]
    usage: TokenUsage
    model: str
    finish_reason: Optional[str] = None


class LLMClient:
    """Client for a chat-completion API.

    The provider SDK client is built lazily so that configuration
    problems surface on first use, not at import time.
    """

    def __init__(self, config: Optional[APIConfig] = None) -> None:
        """Initialize the LLM client.

        Args:
            config: API configuration. Uses defaults if not provided.
        """
        self.config = config or APIConfig()
        self._client: Any = None
        self._total_usage = TokenUsage()

    @property
    def client(self) -> Any:
        """Lazily initialize the provider SDK client.

        Returns:
            An authenticated ``AzureOpenAI`` or ``Anthropic`` client.

        Raises:
            ValueError: If credentials or the endpoint are missing, or the
                provider is unknown.
        """
        if self._client is None:
            self._client = self._build_client()
        return self._client

    def _build_client(self) -> Any:
        provider = self.config.provider
        if provider == PROVIDER_AZURE_OPENAI:
            if not self.config.api_key:
                raise ValueError(
                    "AZURE_OPENAI_API_KEY environment variable is not set. "
                    "Set it before making API calls."
                )
            if not self.config.endpoint:
                raise ValueError(
                    "AZURE_OPENAI_ENDPOINT environment variable is not set. "
                    "Set it before making API calls."
                )
            return AzureOpenAI(
                azure_endpoint=self.config.endpoint,
                api_key=self.config.api_key,
                api_version=self.config.api_version,
                azure_deployment=self.config.deployment,
                max_retries=0,
            )
        if provider == PROVIDER_ANTHROPIC:
            if not self.config.api_key:
                raise ValueError(
                    "ANTHROPIC_API_KEY environment variable is not set. "
                    "Set it before making API calls."
                )
            return anthropic.Anthropic(api_key=self.config.api_key, max_retries=0)
        raise ValueError(f"Unknown API provider: {provider}")

    def generate(self, prompt: str, system: Optional[str] = None) -> GenerationResult:
        """Generate text for a prompt with a single API request.

        Args:
            prompt: The user message prompt.
            system: Optional system prompt for context.

        Returns:
            A GenerationResult; ``content`` is None when the API returned
            no choices or an empty message.

        Raises:
            ValueError: If the client cannot be configured.
            openai.APIError: If the Azure OpenAI request fails.
            anthropic.APIError: If the Anthropic request fails.
        """
        if self.config.provider == PROVIDER_ANTHROPIC:
            result = self._generate_anthropic(prompt, system)
        else:
            result = self._generate_azure(prompt, system)

        self._total_usage.input_tokens += result.usage.input_tokens
        self._total_usage.output_tokens += result.usage.output_tokens

        logger.info(
            "Finish reason: %s, content length: %d (tokens in: %d, out: %d)",
            result.finish_reason,
            len(result.content or ""),
            result.usage.input_tokens,
            result.usage.output_tokens,
        )
        return result

    def _generate_azure(self, prompt: str, system: Optional[str]) -> GenerationResult:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        logger.info(
            "API call: model=%s, messages=%d", self.config.deployment, len(messages)
        )
        response = self.client.chat.completions.create(
            model=self.config.deployment,
            messages=messages,
            max_completion_tokens=self.config.max_completion_tokens,
        )

        choices = response.choices or []
        logger.info("API response: %d choices", len(choices))

        usage = TokenUsage()
        if response.usage is not None:
            usage = TokenUsage(
                input_tokens=response.usage.prompt_tokens or 0,
                output_tokens=response.usage.completion_tokens or 0,
            )

        if not choices:
            return GenerationResult(
                content=None, usage=usage, model=response.model or self.config.deployment
            )

        choice = choices[0]
        content = choice.message.content if choice.message else None
        if not content:
            logger.debug("Choice without content: %r", choice)

        return GenerationResult(
            content=content or None,
            usage=usage,
            model=response.model or self.config.deployment,
            finish_reason=choice.finish_reason,
        )

    def _generate_anthropic(
        self, prompt: str, system: Optional[str]
    ) -> GenerationResult:
        kwargs: dict = {
            "model": self.config.deployment,
            "max_tokens": self.config.max_completion_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        logger.info("API call: model=%s, messages=1", self.config.deployment)
        response = self.client.messages.create(**kwargs)

        content = None
        if response.content:
            content = response.content[0].text or None

        return GenerationResult(
            content=content,
            usage=TokenUsage(
                input_tokens=response.usage.input_tokens,
                output_tokens=response.usage.output_tokens,
            ),
            model=response.model,
            finish_reason=response.stop_reason,
        )

    @property
    def total_usage(self) -> TokenUsage:
        """Get the cumulative token usage across all calls.

        Returns:
            A TokenUsage with total input and output tokens.
        """
        return self._total_usage

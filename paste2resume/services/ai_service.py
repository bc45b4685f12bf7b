"""
AI Service for interacting with GPT (OpenAI), Claude (Anthropic) and Ollama LLMs.
"""

import os
from typing import Any, Dict, List, Optional

import ollama
from anthropic import Anthropic
from openai import OpenAI

from paste2resume.config import Settings
from paste2resume.exceptions import ConfigurationError
from paste2resume.utils.logger import get_logger


logger = get_logger(__name__)

API_KEY_VARIABLES = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


class AIService:
    """Service for AI/LLM interactions using GPT, Claude, or Ollama."""

    def __init__(self, settings: Settings):
        """
        Initialize AI Service.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.max_tokens = settings.ai_settings.max_tokens
        self.fallback_model = settings.ai_settings.fallback_model
        self._clients: Dict[str, Any] = {}

        logger.info(
            f"✅ AI service ready (extraction: {settings.ai_settings.extraction_model}, "
            f"generation: {settings.ai_settings.generation_model})"
        )

    @staticmethod
    def determine_provider(model: str) -> str:
        """Determine which AI provider to use based on model name."""
        if model.startswith("claude"):
            return "anthropic"
        elif model.startswith(("gpt-", "o1", "o3", "o4")):
            return "openai"
        else:
            return "ollama"

    def resolve_model(self, model: str) -> str:
        """
        Pick the model that will actually serve a request.

        Hosted models need an API key; without one the configured Ollama
        fallback model is used instead.

        Args:
            model: Requested model name

        Returns:
            Model name to call

        Raises:
            ConfigurationError: If the key is missing and no fallback is configured
        """
        provider = self.determine_provider(model)
        if provider == "ollama":
            return model

        key_variable = API_KEY_VARIABLES[provider]
        if os.getenv(key_variable):
            return model

        if not self.fallback_model:
            raise ConfigurationError(f"{key_variable} is not set and no fallback model is configured")

        logger.warning(f"⚠️ {key_variable} not found. Add it to .env file.")
        logger.warning(f"   Falling back to Ollama model {self.fallback_model}...")
        return self.fallback_model

    def _client(self, provider: str):
        """Create API clients on first use."""
        if provider not in self._clients:
            if provider == "anthropic":
                self._clients[provider] = Anthropic(api_key=os.getenv("ANTHROPIC_API_KEY"))
            elif provider == "openai":
                self._clients[provider] = OpenAI(api_key=os.getenv("OPENAI_API_KEY"))
            logger.info(f"✅ Initialized {provider} client")
        return self._clients[provider]

    def generate_completion(
        self,
        prompt: str,
        model: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: Optional[int] = None
    ) -> str:
        """
        Generate completion using the provider that serves ``model``.

        Args:
            prompt: User prompt
            model: Model name (provider is inferred from it)
            system_prompt: Optional system prompt
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate

        Returns:
            Generated text response
        """
        model = self.resolve_model(model)
        provider = self.determine_provider(model)
        max_tokens = max_tokens or self.max_tokens

        try:
            if provider == "anthropic":
                return self._generate_anthropic(prompt, model, system_prompt, temperature, max_tokens)
            elif provider == "openai":
                return self._generate_openai(prompt, model, system_prompt, temperature, max_tokens)
            else:
                return self._generate_ollama(prompt, model, system_prompt, temperature)

        except Exception as e:
            logger.error(f"❌ AI generation error ({provider}/{model}): {str(e)}")
            raise

    @staticmethod
    def _messages(prompt: str, system_prompt: Optional[str]) -> List[Dict[str, str]]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    def _generate_ollama(
        self,
        prompt: str,
        model: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0
    ) -> str:
        """Generate completion using Ollama."""
        response = ollama.chat(
            model=model,
            messages=self._messages(prompt, system_prompt),
            options={"temperature": temperature}
        )

        return response['message']['content'].strip()

    def _generate_anthropic(
        self,
        prompt: str,
        model: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 4000
    ) -> str:
        """Generate completion using Claude (Anthropic)."""
        response = self._client("anthropic").messages.create(
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
            system=system_prompt if system_prompt else "You are a professional resume writer.",
            messages=[{"role": "user", "content": prompt}]
        )

        return response.content[0].text.strip()

    def _generate_openai(
        self,
        prompt: str,
        model: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 4000
    ) -> str:
        """Generate completion using OpenAI GPT."""
        response = self._client("openai").chat.completions.create(
            model=model,
            messages=self._messages(prompt, system_prompt),
            temperature=temperature,
            max_tokens=max_tokens
        )

        return (response.choices[0].message.content or "").strip()

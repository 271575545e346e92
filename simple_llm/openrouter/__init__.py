"""OpenRouter chat completions adapter."""

from .client import OpenRouterProvider

__all__ = ["OpenRouterProvider"]

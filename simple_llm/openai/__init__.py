"""OpenAI Responses API adapter."""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]

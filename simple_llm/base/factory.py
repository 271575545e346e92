"""Provider registry.

Maps the provider names a ``Client`` accepts to adapter classes. Adapter
modules are imported on first use, so a client that only ever runs in fake
mode never imports any vendor code.

Semantics
---------
- Lookup is exact: ``"OpenAI"`` is not ``"openai"``.
- Every failure to produce an adapter surfaces as
  :class:`UnknownProviderError`; there are no fallbacks.
- Instances are not cached here; ``Client`` keeps the one it resolved.
"""

from __future__ import annotations

from importlib import import_module
from typing import Dict, Optional, Tuple, Type

from .dto import AdapterParams
from .errors import UnknownProviderError
from .interfaces import ProviderAdapter


class ProviderFactory:
    """Build adapters from a provider name (``"anthropic"``, ``"openai"``, ``"openrouter"``)."""

    # name -> (module path, class name)
    _PROVIDERS: Dict[str, Tuple[str, str]] = {
        "anthropic": ("simple_llm.anthropic.client", "AnthropicProvider"),
        "openai": ("simple_llm.openai.client", "OpenAIProvider"),
        "openrouter": ("simple_llm.openrouter.client", "OpenRouterProvider"),
    }

    @classmethod
    def _load_class(cls, provider: str) -> Type:
        entry = cls._PROVIDERS.get(provider)
        if entry is None:
            raise UnknownProviderError(
                f"Unknown provider: {provider!r} (supported: {', '.join(cls.supported())})"
            )
        module_path, class_name = entry
        try:
            module = import_module(module_path)
        except ImportError as exc:
            raise UnknownProviderError(f"Failed to import {module_path!r} for provider {provider!r}: {exc}") from exc
        klass = getattr(module, class_name, None)
        if klass is None:
            raise UnknownProviderError(f"{class_name!r} not found in {module_path!r} for provider {provider!r}")
        return klass

    @classmethod
    def create(cls, provider: str, *, params: Optional[AdapterParams] = None) -> ProviderAdapter:
        """Instantiate the adapter registered under ``provider``.

        Parameters
        ----------
        provider:
            Registered provider name.
        params:
            Construction parameters; defaults to an empty ``AdapterParams``.

        Returns
        -------
        ProviderAdapter
            A new adapter instance.

        Raises
        ------
        UnknownProviderError
            The name is not registered, its module or class cannot be loaded,
            or the adapter rejects ``params``.
        """
        klass = cls._load_class(provider)
        try:
            return klass.from_params(params or AdapterParams())
        except TypeError as exc:
            raise UnknownProviderError(f"{provider!r} adapter rejected its parameters: {exc}") from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Registered provider names, in registration order."""
        return tuple(cls._PROVIDERS)


def create_provider(provider: str, params: Optional[AdapterParams] = None) -> ProviderAdapter:
    """Shorthand for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, params=params)


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]

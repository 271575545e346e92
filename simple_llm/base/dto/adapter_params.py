"""Typed parameter object for provider adapter initialization.

Purpose
-------
Capture the optional construction parameters shared by all adapters so the
factory and ``Client`` can pass them through without long argument lists.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()`` convenience.

Notes
-----
- Credentials are deliberately absent: adapters read them from the process
  environment on every call.
"""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    base_url:
        Override for the API base URL (useful for proxies or gateways). The
        adapter appends its versioned endpoint path to it.
    timeout_seconds:
        Request timeout for the pooled HTTP client.
    headers:
        Static HTTP headers added to every request. Adapter auth and content
        headers win on conflict.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: Optional[str] = None
    timeout_seconds: Optional[float] = Field(default=None, gt=0)
    headers: Dict[str, str] = Field(default_factory=dict)


__all__ = ["AdapterParams"]

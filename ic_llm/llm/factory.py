from __future__ import annotations

from typing import TYPE_CHECKING

from .http_caller import HttpCanisterCaller
from .mock import MockCanisterCaller

if TYPE_CHECKING:
    from ic_llm.config import Settings


def build_caller(settings: Settings):
    backend = settings.backend
    if backend == "mock":
        return MockCanisterCaller()
    if backend == "http":
        if not settings.gateway_url:
            raise RuntimeError("IC_LLM_GATEWAY_URL is not set, but IC_LLM_BACKEND=http")
        return HttpCanisterCaller(gateway_url=settings.gateway_url, timeout_s=settings.timeout_s)
    raise ValueError(f"unknown IC_LLM_BACKEND={backend!r}, expected one of: mock|http")

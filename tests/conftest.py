from __future__ import annotations

import pytest

from ic_llm.ledger import LedgerCanister
from ic_llm.llm.gateway import LLMCanister
from ic_llm.llm.mock import MockCanisterCaller


class ScriptedCaller:
    """Canister caller that replies with a fixed value per method and records every call."""

    def __init__(self, replies: dict[str, object]) -> None:
        self.replies = replies
        self.calls: list[tuple[str, str, dict]] = []

    async def call(self, canister_id: str, method: str, arg: dict) -> object:
        self.calls.append((canister_id, method, arg))
        reply = self.replies[method]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def methods(self) -> list[str]:
        return [method for _, method, _ in self.calls]


@pytest.fixture
def mock_caller() -> MockCanisterCaller:
    return MockCanisterCaller()


@pytest.fixture
def make_scripted():
    def _make(**replies: object) -> ScriptedCaller:
        return ScriptedCaller(replies)

    return _make


@pytest.fixture
def make_agents():
    def _make(caller) -> tuple[LLMCanister, LedgerCanister]:
        return LLMCanister(caller), LedgerCanister(caller)

    return _make

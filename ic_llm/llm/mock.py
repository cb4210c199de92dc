from __future__ import annotations

import re
from typing import Any

_HEX64 = re.compile(r"\b[0-9a-fA-F]{64}\b")


class MockCanisterCaller:
    """Deterministic offline backend: useful to exercise the agents without a network."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    async def call(self, canister_id: str, method: str, arg: dict[str, Any]) -> Any:
        self.calls.append((canister_id, method, arg))
        if method == "v0_chat":
            messages = arg.get("messages") or []
            last_user = next((m["content"] for m in reversed(messages) if m["role"] == "user"), "")
            # Mimic the lookup agent's contract when an account is present.
            found = _HEX64.search(last_user)
            if found:
                return f"LOOKUP({found.group(0)})"
            return f"[MOCK] {last_user}"
        if method == "account_balance":
            return {"e8s": 0}
        raise ValueError(f"MockCanisterCaller has no reply for method {method!r}")

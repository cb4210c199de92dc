from __future__ import annotations


class CanisterCallError(RuntimeError):
    """A call to a remote canister failed. Fatal for the current invocation."""

    def __init__(self, canister_id: str, method: str, reason: str = "") -> None:
        self.canister_id = canister_id
        self.method = method
        self.reason = reason
        msg = f"call to {canister_id}.{method} failed"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)

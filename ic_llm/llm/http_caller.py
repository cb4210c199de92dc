from __future__ import annotations

from typing import Any

import httpx

from ic_llm.errors import CanisterCallError


class HttpCanisterCaller:
    """
    Canister calls through a JSON/HTTP gateway.

    POST {gateway_url}/canisters/{canister_id}/{method} with the argument as JSON body;
    the JSON response body is the decoded reply. Bytes travel as lowercase hex strings.
    Failures are not retried.
    """

    def __init__(self, *, gateway_url: str, timeout_s: float = 120.0) -> None:
        self.gateway_url = gateway_url.rstrip("/")
        self.timeout_s = timeout_s

    async def call(self, canister_id: str, method: str, arg: dict[str, Any]) -> Any:
        url = f"{self.gateway_url}/canisters/{canister_id}/{method}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s) as client:
                r = await client.post(url, json=arg)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPError as e:
            raise CanisterCallError(canister_id, method, str(e) or type(e).__name__) from e
        except ValueError as e:
            # Body was not JSON.
            raise CanisterCallError(canister_id, method, f"undecodable reply: {e}") from e

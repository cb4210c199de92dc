from __future__ import annotations

from ic_llm.errors import CanisterCallError
from ic_llm.schema.chat_request import ChatRequest

from .base import CanisterCaller, ChatMessage, Model

# The principal of the LLM canister.
LLM_CANISTER_ID = "w36hm-eqaaa-aaaal-qr76a-cai"
CHAT_METHOD = "v0_chat"


class LLMCanister:
    """Client for the LLM canister: one `v0_chat` call per request, no retries."""

    def __init__(self, caller: CanisterCaller, *, canister_id: str = LLM_CANISTER_ID) -> None:
        self.caller = caller
        self.canister_id = canister_id

    async def prompt(self, model: Model, prompt: str) -> str:
        """Send a single user message to `model`."""
        return await self._send(ChatRequest.from_prompt(model, prompt))

    async def chat(self, model: Model, messages: list[ChatMessage]) -> str:
        """Send a list of messages to `model` and return the assistant's text."""
        return await self._send(ChatRequest.from_conversation(model, messages))

    async def _send(self, request: ChatRequest) -> str:
        reply = await self.caller.call(self.canister_id, CHAT_METHOD, request.model_dump())
        if not isinstance(reply, str):
            raise CanisterCallError(
                self.canister_id, CHAT_METHOD, f"expected text reply, got {type(reply).__name__}"
            )
        return reply

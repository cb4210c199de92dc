from __future__ import annotations

from pydantic import BaseModel, Field

from ic_llm.llm.base import ChatMessage, ChatMessagePayload, Model, Role


class ChatRequest(BaseModel):
    """Argument of the LLM canister's `v0_chat` method."""

    model: str
    messages: list[ChatMessagePayload] = Field(default_factory=list)

    @classmethod
    def from_conversation(cls, model: Model, messages: list[ChatMessage]) -> ChatRequest:
        return cls(model=str(model), messages=[m.encode() for m in messages])

    @classmethod
    def from_prompt(cls, model: Model, prompt: str) -> ChatRequest:
        return cls.from_conversation(model, [ChatMessage(Role.USER, prompt)])

    def to_conversation(self) -> list[ChatMessage]:
        return [ChatMessage.decode(m) for m in self.messages]

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Protocol

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Model(str, Enum):
    """Models served by the LLM canister. Values are the names the canister expects."""

    LLAMA3_1_8B = "llama3.1:8b"

    def __str__(self) -> str:
        return self.value


class ChatMessagePayload(BaseModel):
    """Wire form of a single chat message."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str

    def __post_init__(self) -> None:
        # Accept the plain tag ("user") as well; anything else is a bug in the caller.
        object.__setattr__(self, "role", Role(self.role))

    def encode(self) -> ChatMessagePayload:
        return ChatMessagePayload(role=self.role.value, content=self.content)

    @classmethod
    def decode(cls, payload: ChatMessagePayload) -> ChatMessage:
        return cls(Role(payload.role), payload.content)


class CanisterCaller(Protocol):
    async def call(self, canister_id: str, method: str, arg: dict[str, Any]) -> Any:
        """Perform one update call and return the decoded reply."""
        raise NotImplementedError

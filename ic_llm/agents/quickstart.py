from __future__ import annotations

from ic_llm.llm import ChatMessage, Model
from ic_llm.llm.gateway import LLMCanister


async def prompt(prompt_str: str, llm: LLMCanister) -> str:
    return await llm.prompt(Model.LLAMA3_1_8B, prompt_str)


async def chat(messages: list[ChatMessage], llm: LLMCanister) -> str:
    return await llm.chat(Model.LLAMA3_1_8B, messages)

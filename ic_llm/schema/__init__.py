from .chat_request import ChatMessagePayload, ChatRequest

__all__ = ["ChatMessagePayload", "ChatRequest"]

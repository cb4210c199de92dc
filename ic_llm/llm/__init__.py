from .base import CanisterCaller, ChatMessage, Model, Role
from .factory import build_caller

__all__ = ["CanisterCaller", "ChatMessage", "Model", "Role", "build_caller"]

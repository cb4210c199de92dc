from . import lookup, quickstart

__all__ = ["lookup", "quickstart"]

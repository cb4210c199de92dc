"""Client for the LLM canister on the Internet Computer, with two example agents."""

__version__ = "0.1.0"

from __future__ import annotations

from ic_llm.ledger import AccountIdentifier, LedgerCanister
from ic_llm.llm import ChatMessage, Model, Role
from ic_llm.llm.gateway import LLMCanister

from .prompts import LOOKUP_SYSTEM

LOOKUP_PREFIX = "LOOKUP("
LOOKUP_SUFFIX = ")"

MSG_BAD_LENGTH = "Account must be 64 characters long"
MSG_INVALID = "Invalid account"


def parse_lookup(reply: str) -> str | None:
    """
    Return the argument of a `LOOKUP(<account>)` reply, or None if the reply is not a command.

    Exactly one prefix and one trailing ")" are removed; stray parentheses stay in the
    argument and make it fail validation.
    """
    if not (reply.startswith(LOOKUP_PREFIX) and reply.endswith(LOOKUP_SUFFIX)):
        return None
    return reply[len(LOOKUP_PREFIX) : -len(LOOKUP_SUFFIX)]


async def lookup_account(account: str, ledger: LedgerCanister) -> str:
    """Look up the balance of an ICP account given as 64 hex characters."""
    # Length is measured in UTF-8 bytes, as the ledger canister sees it.
    if len(account.encode("utf-8")) != 64:
        return MSG_BAD_LENGTH
    try:
        account_id = AccountIdentifier.from_hex(account)
    except ValueError:
        return MSG_INVALID

    balance = await ledger.account_balance(account_id)
    return f"Balance of {account_id} is {balance} ICP"


async def interpret(reply: str, ledger: LedgerCanister) -> str:
    account = parse_lookup(reply)
    if account is None:
        return reply
    return await lookup_account(account, ledger)


async def chat(messages: list[ChatMessage], llm: LLMCanister, ledger: LedgerCanister) -> str:
    # The system prompt always goes first.
    all_messages = [ChatMessage(Role.SYSTEM, LOOKUP_SYSTEM), *messages]
    answer = await llm.chat(Model.LLAMA3_1_8B, all_messages)
    # The ledger is only consulted once the model has answered.
    return await interpret(answer, ledger)

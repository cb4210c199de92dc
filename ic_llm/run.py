from __future__ import annotations

import argparse
import asyncio
import traceback

from rich.console import Console

from ic_llm.agents import lookup, quickstart
from ic_llm.config import load_settings
from ic_llm.ledger import LedgerCanister
from ic_llm.llm import ChatMessage, Role, build_caller
from ic_llm.llm.gateway import LLMCanister
from ic_llm.utils.run_log import append_event, init_run_log, make_run_id


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ic-llm")
    parser.add_argument(
        "--no-log",
        action="store_true",
        help="do not write a run log (by default one is written to logs/run_*.jsonl)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_prompt = sub.add_parser("prompt", help="send a single prompt to the model")
    p_prompt.add_argument("text", type=str, help="e.g. \"What's the speed of light?\"")

    p_chat = sub.add_parser("chat", help="send a conversation of user messages to an agent")
    p_chat.add_argument("messages", nargs="+", help="user messages, in order")
    p_chat.add_argument(
        "--agent",
        choices=["quickstart", "lookup"],
        default="quickstart",
        help="quickstart passes the conversation through; lookup answers ICP balance questions",
    )
    p_chat.add_argument(
        "--system",
        default=None,
        help="optional system message placed before the user messages",
    )
    return parser


async def _dispatch(args: argparse.Namespace, llm: LLMCanister, ledger: LedgerCanister) -> str:
    if args.command == "prompt":
        return await quickstart.prompt(args.text, llm)

    messages = [ChatMessage(Role.USER, m) for m in args.messages]
    if args.system:
        messages.insert(0, ChatMessage(Role.SYSTEM, args.system))
    if args.agent == "lookup":
        return await lookup.chat(messages, llm, ledger)
    return await quickstart.chat(messages, llm)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    console = Console()
    settings = load_settings()
    caller = build_caller(settings)
    llm = LLMCanister(caller, canister_id=settings.llm_canister_id)
    ledger = LedgerCanister(caller, canister_id=settings.ledger_canister_id)

    do_log = not bool(args.no_log)
    log_paths = init_run_log(settings.log_dir, make_run_id()) if do_log else None
    if log_paths:
        append_event(
            log_paths,
            "start",
            extra={"command": args.command, "backend": settings.backend, "argv": vars(args)},
        )

    try:
        reply = asyncio.run(_dispatch(args, llm, ledger))
    except Exception:
        if log_paths:
            append_event(log_paths, "exception", extra={"traceback": traceback.format_exc()})
        raise

    if log_paths:
        append_event(log_paths, "reply", extra={"reply": reply})

    console.rule("ic-llm")
    console.print(f"[bold]backend[/bold]: {settings.backend}")
    if log_paths:
        console.print(f"[bold]run_log[/bold]: {log_paths.jsonl_path}")
    console.print(reply, markup=False, highlight=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

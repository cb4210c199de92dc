from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from ic_llm.ledger.client import LEDGER_CANISTER_ID
from ic_llm.llm.gateway import LLM_CANISTER_ID
from ic_llm.types import Principal


@dataclass(frozen=True)
class Settings:
    backend: str

    gateway_url: str | None
    timeout_s: float

    llm_canister_id: str
    ledger_canister_id: str

    log_dir: Path


def load_settings() -> Settings:
    # Allow users to keep the gateway URL in a local `.env` (not committed).
    load_dotenv(find_dotenv(usecwd=True), override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    backend = (getenv("IC_LLM_BACKEND", "mock") or "mock").strip().lower()
    gateway_url = getenv("IC_LLM_GATEWAY_URL", None)
    timeout_s = float(getenv("IC_LLM_TIMEOUT_S", "120") or "120")

    llm_canister_id = getenv("IC_LLM_CANISTER_ID", LLM_CANISTER_ID) or LLM_CANISTER_ID
    ledger_canister_id = getenv("IC_LEDGER_CANISTER_ID", LEDGER_CANISTER_ID) or LEDGER_CANISTER_ID
    # Fail at startup rather than on the first call.
    Principal.from_text(llm_canister_id)
    Principal.from_text(ledger_canister_id)

    log_dir = Path(getenv("IC_LLM_LOG_DIR", "logs") or "logs").resolve()

    return Settings(
        backend=backend,
        gateway_url=gateway_url,
        timeout_s=timeout_s,
        llm_canister_id=llm_canister_id,
        ledger_canister_id=ledger_canister_id,
        log_dir=log_dir,
    )

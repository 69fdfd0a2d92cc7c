"""
Solana transaction parser — jsonParsed getTransaction payloads to Transaction.

Deliberately narrow: only the first instruction of a message is read, and
only a System Program "transfer" is understood. Anything else becomes a None
hole in the output, never a dropped entry, so the parsed list always has the
same length as the RPC response.
"""

from __future__ import annotations

from typing import Any

from solwallet.transactions.models import Transaction, lamports_to_sol
from solwallet.wallet_logging import get_logger

logger = get_logger(__name__)

SYSTEM_PROGRAM = "system"
SYSTEM_PROGRAM_ID = "11111111111111111111111111111111"
TRANSFER_TYPE = "transfer"
# Older nodes reported the amount under "carats"
_AMOUNT_KEYS = ("lamports", "carats")


def _get_message(raw: Any) -> dict[str, Any] | None:
    """Return transaction.message from a getTransaction-style result."""
    if not isinstance(raw, dict):
        return None
    tx_obj = raw.get("transaction")
    if not isinstance(tx_obj, dict):
        return None
    message = tx_obj.get("message")
    if not isinstance(message, dict):
        return None
    return message


def _is_system_instruction(instruction: dict[str, Any]) -> bool:
    program = instruction.get("program")
    if program is not None:
        return program == SYSTEM_PROGRAM
    return instruction.get("programId") == SYSTEM_PROGRAM_ID


def _transfer_amount(info: dict[str, Any]) -> int | None:
    for key in _AMOUNT_KEYS:
        value = info.get(key)
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
    return None


def parse_transfer(raw: Any, owner_address: str) -> Transaction | None:
    """
    Parse one jsonParsed transaction into a Transaction seen from owner_address.

    Returns None for a missing message, an empty instruction list, a
    non-system program, a non-transfer instruction or a malformed info block.
    """
    message = _get_message(raw)
    if message is None:
        return None

    instructions = message.get("instructions")
    if not isinstance(instructions, list) or not instructions:
        return None

    instruction = instructions[0]
    if not isinstance(instruction, dict) or not _is_system_instruction(instruction):
        return None

    parsed = instruction.get("parsed")
    if not isinstance(parsed, dict) or parsed.get("type") != TRANSFER_TYPE:
        return None

    info = parsed.get("info")
    if not isinstance(info, dict):
        return None
    source = info.get("source")
    destination = info.get("destination")
    lamports = _transfer_amount(info)
    if not isinstance(source, str) or not isinstance(destination, str) or lamports is None:
        return None

    return Transaction(
        origin=source,
        destination=destination,
        amount=lamports_to_sol(lamports),
        received=destination == owner_address,
    )


def parse_transactions(raw_list: list[Any], owner_address: str) -> list[Transaction | None]:
    """
    Parse a list of getTransaction results for one account.

    Output has one entry per input, in input order; unsupported shapes are None.
    """
    parsed = [parse_transfer(raw, owner_address) for raw in raw_list]
    unsupported = sum(1 for p in parsed if p is None)
    if unsupported:
        logger.debug(
            "transactions_unsupported_shapes",
            address=owner_address,
            total=len(parsed),
            unsupported=unsupported,
        )
    return parsed

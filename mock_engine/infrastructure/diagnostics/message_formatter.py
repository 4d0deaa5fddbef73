from __future__ import annotations

from typing import Iterable, List

from mock_engine.schemas.call import Call, format_arguments
from mock_engine.schemas.invocation import Invocation
from mock_engine.schemas.setup import Setup
from mock_engine.schemas.times import Times

INDENT = "   "
VERIFY_HEADER = "This mock failed verification due to the following:"
NO_OTHER_CALLS_HEADER = "This mock failed verification due to the following unverified invocations:"
SETUP_NOT_MATCHED = "This setup was not matched."


def mock_prefix(type_name: str, mock_id: int) -> str:
    """Mock<IMyInterface:1>:\\n"""
    return f"Mock<{type_name}:{mock_id}>:\n"


def _block(prefix: str, header: str, lines: List[str], sep: str) -> str:
    # header, blank line, then one entry per line
    return prefix + header + sep + sep + sep.join(lines)


def strict_invocation_message(type_name: str, call: Call) -> str:
    return (
        f"{call.render(type_name)} invocation failed with mock behavior Strict.\n"
        "All invocations on the mock must have a corresponding setup."
    )


def setup_not_matched_entry(type_name: str, setup: Setup) -> str:
    return f"{INDENT}{setup.describe(type_name)}:\n{INDENT}{SETUP_NOT_MATCHED}"


def unmatched_setups_message(
    type_name: str, mock_id: int, setups: Iterable[Setup], *, sep: str = "\r\n"
) -> str:
    lines = [setup_not_matched_entry(type_name, s) for s in setups]
    return _block(mock_prefix(type_name, mock_id), VERIFY_HEADER, lines, sep)


def unverified_invocations_message(
    type_name: str, mock_id: int, invocations: Iterable[Invocation], *, sep: str = "\r\n"
) -> str:
    lines = [f"{INDENT}{i.render(type_name)}" for i in invocations]
    return _block(mock_prefix(type_name, mock_id), NO_OTHER_CALLS_HEADER, lines, sep)


def times_mismatch_message(type_name: str, mock_id: int, call: Call, times: Times, count: int) -> str:
    expectation = f"x => x.{call.method_name}({format_arguments(call.arguments)})"
    return (
        f"{mock_prefix(type_name, mock_id)}"
        f"Expected invocation on the mock {times.describe()}, but was {count} times: {expectation}"
    )

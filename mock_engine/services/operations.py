"""
Functional entry points mirroring the engine's public operations.

    mock = create_mock("IMyInterface", MockBehavior.STRICT)
    setup(mock, "DoTheThing", ("A",), "1", verifiable=True)
    invoke(mock, "DoTheThing", ("A",))  # -> "1"
    verify(mock)
"""
from __future__ import annotations

from typing import Any, Hashable, Iterable, List, Mapping, Optional, Sequence

from mock_engine.core.config import MockBehavior
from mock_engine.core.container import Container
from mock_engine.schemas.invocation import Invocation
from mock_engine.schemas.sequence import MockSequence
from mock_engine.schemas.times import Times
from mock_engine.services.mock_engine import NO_RESPONSE, MockEngine
from mock_engine.services.setup_handles import SequenceSetupHandle, SetupHandle

container = Container()


def create_mock(
    type_name: Optional[str] = None,
    behavior: MockBehavior | str | None = None,
    result_types: Optional[Mapping[str, Any]] = None,
) -> MockEngine:
    return container.mock_engine(type_name=type_name, behavior=behavior, result_types=result_types)


def setup(
    mock: MockEngine,
    method_name: str,
    args: Iterable[Any] = (),
    response: Any = NO_RESPONSE,
    verifiable: bool = False,
) -> SetupHandle:
    return mock.setup(method_name, args, response, verifiable=verifiable)


def setup_sequence(
    mock: MockEngine, method_name: str, args: Iterable[Any] = (), responses: Sequence[Any] = ()
) -> SequenceSetupHandle:
    return mock.setup_sequence(method_name, args, responses)


def in_sequence(
    mock: MockEngine,
    sequence_id: MockSequence | Hashable,
    method_name: str,
    args: Iterable[Any] = (),
    response: Any = NO_RESPONSE,
) -> SetupHandle:
    return mock.in_sequence(sequence_id, method_name, args, response)


def invoke(mock: MockEngine, method_name: str, args: Iterable[Any] = ()) -> Any:
    return mock.invoke(method_name, args)


def verify(mock: MockEngine) -> None:
    mock.verify()


def verify_all(mock: MockEngine) -> None:
    mock.verify_all()


def verify_invoked(
    mock: MockEngine, method_name: str, args: Iterable[Any] = (), times: Optional[Times] = None
) -> List[Invocation]:
    return mock.verify_invoked(method_name, args, times)


def verify_no_other_calls(mock: MockEngine) -> None:
    mock.verify_no_other_calls()

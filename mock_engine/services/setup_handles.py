from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from mock_engine.core.exceptions.base import SetupError
from mock_engine.schemas.responses import ComputeValue, RaiseError, ResponseProducer, as_producer
from mock_engine.schemas.setup import Setup

if TYPE_CHECKING:
    from mock_engine.services.mock_engine import MockEngine


class SetupHandle:
    """
    Fluent view over one registered Setup.

    Every call writes straight through to the Setup record held by the
    registry; the handle itself keeps no state.
    """

    def __init__(self, engine: "MockEngine", setup: Setup) -> None:
        self._engine = engine
        self.setup = setup

    # ---- responses ----
    def returns(self, value: Any) -> "SetupHandle":
        self._add_response(as_producer(value))
        return self

    def returns_using(self, func: Callable[..., Any]) -> "SetupHandle":
        self._add_response(ComputeValue(func))
        return self

    def throws(self, exc: BaseException) -> "SetupHandle":
        self._add_response(RaiseError(exc))
        return self

    # ---- flags ----
    def verifiable(self) -> "SetupHandle":
        with self._engine.lock:
            self._ensure_live()
            self.setup.verifiable = True
        return self

    # ---- introspection ----
    @property
    def id(self) -> int:
        return self.setup.id

    @property
    def match_count(self) -> int:
        return self.setup.match_count

    @property
    def is_live(self) -> bool:
        return self.setup.is_live

    @property
    def verified(self) -> bool:
        return self.setup.verified

    # ---- internals ----
    def _add_response(self, producer: ResponseProducer) -> None:
        # a plain setup has a single response; re-declaring it replaces the previous one
        with self._engine.lock:
            self._ensure_live()
            self.setup.responses = [producer]

    def _ensure_live(self) -> None:
        if self.setup.superseded:
            raise SetupError(
                f"Setup {self.setup.describe(self._engine.type_name)} was overridden by a later setup"
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.setup!r})"


class SequenceSetupHandle(SetupHandle):
    """Each chained response answers one more call, in order."""

    def _add_response(self, producer: ResponseProducer) -> None:
        with self._engine.lock:
            self._ensure_live()
            self.setup.responses.append(producer)

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from mock_engine.core.config import MockBehavior
from mock_engine.services.mock_engine import NO_RESPONSE, MockEngine
from mock_engine.services.setup_handles import SequenceSetupHandle, SetupHandle


class EngineBackedDouble:
    """
    For hand-written doubles: each method forwards to the engine with
    ``return self._invoke(self.method, *args)``.
    The method's attribute name is the engine's method name.
    """

    mock_type_name: Optional[str] = None

    def __init__(
        self,
        engine: Optional[MockEngine] = None,
        behavior: MockBehavior | str | None = None,
    ) -> None:
        self.engine = engine or MockEngine(
            type_name=self.mock_type_name or type(self).__name__, behavior=behavior
        )

    def _name(self, method: Callable) -> str:
        return method.__name__

    def _invoke(self, method: Callable, /, *args: Any) -> Any:
        return self.engine.invoke(self._name(method), args)

    # ---- arrange through method references ----
    def setup(
        self, method: Callable, *args: Any, response: Any = NO_RESPONSE, verifiable: bool = False
    ) -> SetupHandle:
        return self.engine.setup(self._name(method), args, response, verifiable=verifiable)

    def setup_sequence(self, method: Callable, *args: Any) -> SequenceSetupHandle:
        return self.engine.setup_sequence(self._name(method), args)

    def in_sequence(self, sequence: Any, method: Callable, *args: Any, response: Any = NO_RESPONSE) -> SetupHandle:
        return self.engine.in_sequence(sequence, self._name(method), args, response)

    @property
    def received_calls(self) -> List[Tuple[str, tuple]]:
        return [(i.method_name, i.arguments) for i in self.engine.invocations]

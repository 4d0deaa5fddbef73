"""
The mock engine façade: one owned aggregate per mock instance.

Arrange with ``setup`` / ``setup_sequence`` / ``in_sequence``, act with
``invoke``, assert with the ``verify*`` family. Every public operation runs
inside the instance's lock so concurrent callers are serialised.
"""
from __future__ import annotations

import itertools
import logging
import threading
from typing import Any, Hashable, Iterable, List, Mapping, Optional, Sequence

from mock_engine.core.config import MockBehavior, Settings, settings as default_settings
from mock_engine.core.exceptions.base import InvocationFailure
from mock_engine.infrastructure.default_values import DefaultValueProvider
from mock_engine.infrastructure.diagnostics.message_formatter import strict_invocation_message
from mock_engine.infrastructure.invocation_log.invocation_log import InvocationLog
from mock_engine.infrastructure.registry.setup_registry import SetupRegistry
from mock_engine.schemas.call import Call
from mock_engine.schemas.invocation import Invocation
from mock_engine.schemas.responses import as_producer
from mock_engine.schemas.sequence import MockSequence
from mock_engine.schemas.setup import Setup, build_setup
from mock_engine.schemas.times import Times
from mock_engine.services.setup_handles import SequenceSetupHandle, SetupHandle
from mock_engine.services.verifier import Verifier

logger = logging.getLogger(__name__)

# marks "no response declared" so that None stays a legal response
NO_RESPONSE = object()


class MockEngine:
    _mock_ids = itertools.count(1)

    def __init__(
        self,
        type_name: Optional[str] = None,
        behavior: MockBehavior | str | None = None,
        result_types: Optional[Mapping[str, Any]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or default_settings
        self._behavior = MockBehavior(behavior) if behavior is not None else self.settings.DEFAULT_BEHAVIOR
        self.type_name = type_name or self.settings.DEFAULT_TYPE_NAME
        self.mock_id = next(MockEngine._mock_ids)

        self.registry = SetupRegistry()
        self.log = InvocationLog()
        self.defaults = DefaultValueProvider(result_types)
        self.verifier = Verifier(
            self.registry,
            self.log,
            self.type_name,
            self.mock_id,
            line_separator=self.settings.MESSAGE_LINE_SEPARATOR,
            log_diagnostics=self.settings.LOG_DIAGNOSTICS,
        )
        self.lock = threading.RLock()
        logger.debug(f"Created mock {self.name} with behavior {self._behavior.value}")

    @property
    def behavior(self) -> MockBehavior:
        return self._behavior

    @property
    def name(self) -> str:
        return f"Mock<{self.type_name}:{self.mock_id}>"

    # ---- arrange ----
    def setup(
        self,
        method_name: str,
        args: Iterable[Any] = (),
        response: Any = NO_RESPONSE,
        *,
        verifiable: bool = False,
    ) -> SetupHandle:
        responses = [] if response is NO_RESPONSE else [as_producer(response)]
        setup = self._register(build_setup(method_name, args, responses, verifiable=verifiable))
        return SetupHandle(self, setup)

    def setup_sequence(
        self,
        method_name: str,
        args: Iterable[Any] = (),
        responses: Sequence[Any] = (),
    ) -> SequenceSetupHandle:
        producers = [as_producer(r) for r in responses]
        setup = self._register(build_setup(method_name, args, producers))
        return SequenceSetupHandle(self, setup)

    def in_sequence(
        self,
        sequence: MockSequence | Hashable,
        method_name: str,
        args: Iterable[Any] = (),
        response: Any = NO_RESPONSE,
        *,
        verifiable: bool = False,
    ) -> SetupHandle:
        sequence_id = sequence.sequence_id if isinstance(sequence, MockSequence) else sequence
        if sequence_id is None:
            raise ValueError("sequence must not be None")
        responses = [] if response is NO_RESPONSE else [as_producer(response)]
        setup = self._register(
            build_setup(method_name, args, responses, verifiable=verifiable, sequence_id=sequence_id)
        )
        return SetupHandle(self, setup)

    def new_sequence(self, name: Optional[str] = None) -> MockSequence:
        return MockSequence(name=name)

    def _register(self, setup: Setup) -> Setup:
        with self.lock:
            return self.registry.register(setup)

    # ---- act ----
    def invoke(self, method_name: str, args: Iterable[Any] = ()) -> Any:
        with self.lock:
            call = Call(method_name=method_name, arguments=args)
            result = self.registry.resolve(call)
            invocation = self.log.append(call, result.resolution)

            if result.is_matched:
                if result.response is None:
                    return self.defaults.default(method_name)
                return result.response.produce(call)

            if self._behavior is MockBehavior.STRICT:
                message = strict_invocation_message(self.type_name, call)
                logger.warning(f"{self.name}: {message}")
                raise InvocationFailure(message, invocation=invocation)

            return self.defaults.default(method_name)

    # ---- assert ----
    def verify(self) -> None:
        with self.lock:
            self.verifier.verify()

    def verify_all(self) -> None:
        with self.lock:
            self.verifier.verify_all()

    def verify_invoked(
        self, method_name: str, args: Iterable[Any] = (), times: Optional[Times] = None
    ) -> List[Invocation]:
        with self.lock:
            call = Call(method_name=method_name, arguments=args)
            return self.verifier.verify_invoked(call, times or Times.at_least_once())

    def verify_no_other_calls(self) -> None:
        with self.lock:
            self.verifier.verify_no_other_calls()

    # ---- introspection ----
    @property
    def invocations(self) -> List[Invocation]:
        return list(self.log)

    @property
    def setups(self) -> List[Setup]:
        return sorted(self.registry.live_setups(), key=lambda s: s.id)

    def __repr__(self) -> str:
        return f"{self.name}({self._behavior.value}, setups={len(self.registry)}, invocations={len(self.log)})"

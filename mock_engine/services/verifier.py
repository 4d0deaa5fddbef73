from __future__ import annotations

import logging
from typing import Callable, List

from mock_engine.core.exceptions.base import VerificationFailure
from mock_engine.infrastructure.diagnostics.message_formatter import (
    times_mismatch_message,
    unmatched_setups_message,
    unverified_invocations_message,
)
from mock_engine.infrastructure.invocation_log.invocation_log import InvocationLog
from mock_engine.infrastructure.registry.setup_registry import SetupRegistry
from mock_engine.schemas.call import Call
from mock_engine.schemas.invocation import Invocation
from mock_engine.schemas.setup import Setup
from mock_engine.schemas.times import Times

logger = logging.getLogger(__name__)


class Verifier:
    """
    Assert-phase checks over one mock's registry and invocation log.

    ``verify`` only looks at setups declared verifiable and is the only
    place (together with ``verify_all``/``verify_invoked``) where invocations
    become verified. ``verify_no_other_calls`` is read-only and reports
    every invocation no verification pass has accounted for.
    """

    def __init__(
        self,
        registry: SetupRegistry,
        log: InvocationLog,
        type_name: str,
        mock_id: int,
        *,
        line_separator: str = "\r\n",
        log_diagnostics: bool = True,
    ) -> None:
        self.registry = registry
        self.log = log
        self.type_name = type_name
        self.mock_id = mock_id
        self.line_separator = line_separator
        self.log_diagnostics = log_diagnostics

    # ---- public checks ----
    def verify(self) -> None:
        self._verify_setups(lambda s: s.verifiable)

    def verify_all(self) -> None:
        self._verify_setups(lambda s: True)

    def verify_invoked(self, call: Call, times: Times) -> List[Invocation]:
        performed = self.log.matching(call)
        if not times.verify(len(performed)):
            message = times_mismatch_message(self.type_name, self.mock_id, call, times, len(performed))
            self._fail(message, [call])

        for invocation in performed:
            invocation.mark_verified()
        return performed

    def verify_no_other_calls(self) -> None:
        unverified = self.log.unverified()
        if not unverified:
            return
        message = unverified_invocations_message(
            self.type_name, self.mock_id, unverified, sep=self.line_separator
        )
        self._fail(message, unverified)

    # ---- helpers ----
    def _verify_setups(self, selected: Callable[[Setup], bool]) -> None:
        checked = sorted((s for s in self.registry.live_setups() if selected(s)), key=lambda s: s.id)
        missing = [s for s in checked if s.match_count == 0]
        if missing:
            message = unmatched_setups_message(
                self.type_name, self.mock_id, missing, sep=self.line_separator
            )
            self._fail(message, missing)

        for setup in checked:
            setup.verified = True
        for invocation in self.log.for_setups(s.id for s in checked):
            invocation.mark_verified()

    def _fail(self, message: str, failures: list) -> None:
        if self.log_diagnostics:
            logger.info(f"Verification failed for {self.type_name} mock {self.mock_id}:\n{message}")
        raise VerificationFailure(message, failures=failures)

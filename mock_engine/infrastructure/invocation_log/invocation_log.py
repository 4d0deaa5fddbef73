from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from mock_engine.schemas.call import Call, CallMatcher
from mock_engine.schemas.invocation import Invocation, Resolution

logger = logging.getLogger(__name__)


class InvocationLog:
    """Append-only history of the calls made to one mock."""

    def __init__(self) -> None:
        self._entries: List[Invocation] = []

    def append(self, call: Call, resolution: Resolution) -> Invocation:
        invocation = Invocation.from_call(call, len(self._entries) + 1, resolution)
        self._entries.append(invocation)
        logger.debug(f"#{invocation.sequence_number} {call.method_name}{call.arguments!r} -> {resolution}")
        return invocation

    def for_setups(self, setup_ids: Iterable[int]) -> List[Invocation]:
        wanted = set(setup_ids)
        return [i for i in self._entries if i.resolution.setup_id in wanted]

    def matching(self, call: Call) -> List[Invocation]:
        """Invocations with the same method and literal arguments, whatever they resolved to."""
        matcher = CallMatcher(method_name=call.method_name, arguments=call.arguments)
        return [i for i in self._entries if matcher.matches(i.call)]

    def unverified(self) -> List[Invocation]:
        return [i for i in self._entries if not i.verified_by_history]

    def __iter__(self) -> Iterator[Invocation]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Invocation:
        return self._entries[index]

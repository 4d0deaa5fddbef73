from __future__ import annotations

import itertools
import logging
from typing import Dict, Hashable, Iterator, List, Optional

from mock_engine.infrastructure.registry.sequence_cursor import SequenceCursor
from mock_engine.schemas.call import Call
from mock_engine.schemas.match_result import MatchResult
from mock_engine.schemas.setup import Setup

logger = logging.getLogger(__name__)


class SetupRegistry:
    """All setups of one mock: the unordered pool plus one cursor per sequence."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._pool: List[Setup] = []
        self._cursors: Dict[Hashable, SequenceCursor] = {}
        self._superseded: List[Setup] = []
        self._by_id: Dict[int, Setup] = {}

    # ---- arrange ----
    def register(self, setup: Setup) -> Setup:
        setup.id = next(self._ids)
        self._by_id[setup.id] = setup

        if setup.sequence_id is not None:
            cursor = self._cursors.get(setup.sequence_id)
            if cursor is None:
                cursor = self._cursors[setup.sequence_id] = SequenceCursor(setup.sequence_id)
            cursor.append(setup)
            logger.debug(f"Registered {setup!r} at position {len(cursor) - 1} of its sequence")
            return setup

        for slot, existing in enumerate(self._pool):
            if existing.matcher.same_shape(setup.matcher):
                existing.superseded = True
                self._superseded.append(existing)
                self._pool[slot] = setup
                logger.debug(f"Setup {existing.id} superseded by {setup.id}: {setup.matcher.describe()}")
                return setup

        self._pool.append(setup)
        logger.debug(f"Registered {setup!r}")
        return setup

    # ---- act ----
    def resolve(self, call: Call) -> MatchResult:
        for cursor in self._cursors.values():
            if cursor.head_accepts(call):
                setup = cursor.advance()
                return self._hit(setup)

        for setup in self._pool:
            if setup.matcher.matches(call):
                return self._hit(setup)

        logger.debug(f"No setup matches {call.method_name}{call.arguments!r}")
        return MatchResult.unmatched()

    def _hit(self, setup: Setup) -> MatchResult:
        setup.match_count += 1
        return MatchResult.matched(setup, setup.next_response())

    # ---- assert ----
    def live_setups(self) -> Iterator[Setup]:
        """Pool setups in slot order, then sequence members in registration order."""
        yield from self._pool
        for cursor in self._cursors.values():
            yield from cursor.members

    def get(self, setup_id: int) -> Optional[Setup]:
        return self._by_id.get(setup_id)

    def cursor(self, sequence_id: Hashable) -> Optional[SequenceCursor]:
        return self._cursors.get(sequence_id)

    @property
    def superseded(self) -> List[Setup]:
        return list(self._superseded)

    def __len__(self) -> int:
        return len(self._pool) + sum(len(c) for c in self._cursors.values())

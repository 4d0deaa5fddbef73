from __future__ import annotations

import logging
from typing import Hashable, List, Optional

from mock_engine.schemas.call import Call
from mock_engine.schemas.setup import Setup

logger = logging.getLogger(__name__)


class SequenceCursor:
    """
    Progress through one ordered group of setups.

    Only ``members[head_index]`` is eligible to match. The head advances by one
    on every match and never moves back; a call that misses the head is never
    compared against later members.
    """

    def __init__(self, sequence_id: Hashable) -> None:
        self.sequence_id = sequence_id
        self.members: List[Setup] = []
        self._head_index = 0

    @property
    def head_index(self) -> int:
        return self._head_index

    @property
    def head(self) -> Optional[Setup]:
        if self._head_index < len(self.members):
            return self.members[self._head_index]
        return None

    @property
    def exhausted(self) -> bool:
        return self.head is None

    def append(self, setup: Setup) -> None:
        self.members.append(setup)

    def head_accepts(self, call: Call) -> bool:
        head = self.head
        return head is not None and head.matcher.matches(call)

    def advance(self) -> Setup:
        head = self.head
        if head is None:
            raise IndexError(f"sequence {self.sequence_id!r} has no remaining members")
        self._head_index += 1
        logger.debug(
            f"Sequence {self.sequence_id!r} advanced to {self._head_index}/{len(self.members)}"
        )
        return head

    def __len__(self) -> int:
        return len(self.members)

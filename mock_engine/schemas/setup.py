from typing import Any, Hashable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from mock_engine.schemas.call import CallMatcher
from mock_engine.schemas.responses import ResponseProducer


class Setup(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    # ---- identity ----
    id: int = Field(default=0, ge=0, description="Registration order within the owning registry")
    matcher: CallMatcher

    # ---- response ----
    responses: List[ResponseProducer] = Field(
        default_factory=list,
        description="FIFO queue; each match consumes the head, an empty queue yields the default value",
    )

    # ---- flags ----
    verifiable: bool = False
    sequence_id: Optional[Hashable] = Field(
        default=None, description="Sequence group key; None means the unordered pool"
    )

    # ---- accounting ----
    match_count: int = Field(default=0, ge=0)
    verified: bool = False
    superseded: bool = False

    @computed_field
    @property
    def is_live(self) -> bool:
        return not self.superseded

    @property
    def in_sequence(self) -> bool:
        return self.sequence_id is not None

    def next_response(self) -> Optional[ResponseProducer]:
        """Pop the head of the response queue, None once exhausted."""
        if not self.responses:
            return None
        return self.responses.pop(0)

    def describe(self, type_name: str) -> str:
        return f"{type_name} {self.matcher.describe()}"

    def __repr__(self) -> str:
        return (
            f"Setup(id={self.id}, matcher={self.matcher.describe()!r}, "
            f"verifiable={self.verifiable}, sequence_id={self.sequence_id!r}, "
            f"match_count={self.match_count}, superseded={self.superseded})"
        )


def build_setup(
    method_name: str,
    arguments: Any = (),
    responses: Optional[List[ResponseProducer]] = None,
    *,
    verifiable: bool = False,
    sequence_id: Optional[Hashable] = None,
) -> Setup:
    return Setup(
        matcher=CallMatcher(method_name=method_name, arguments=arguments),
        responses=list(responses or []),
        verifiable=verifiable,
        sequence_id=sequence_id,
    )

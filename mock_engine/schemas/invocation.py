from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from mock_engine.schemas.call import Call, format_arguments


class Resolution(BaseModel):
    """MatchedSetup(setup_id) when setup_id is set, Unmatched otherwise."""

    model_config = ConfigDict(frozen=True)

    setup_id: Optional[int] = None

    @classmethod
    def matched_setup(cls, setup_id: int) -> "Resolution":
        return cls(setup_id=setup_id)

    @classmethod
    def unmatched(cls) -> "Resolution":
        return cls()

    @computed_field
    @property
    def is_matched(self) -> bool:
        return self.setup_id is not None

    def __str__(self) -> str:
        return f"MatchedSetup({self.setup_id})" if self.is_matched else "Unmatched"


class Invocation(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    method_name: str
    arguments: Tuple[Any, ...] = Field(default_factory=tuple)
    sequence_number: int = Field(..., ge=1, description="Position in the mock's call history")
    resolution: Resolution = Field(default_factory=Resolution.unmatched)
    verified_by_history: bool = False

    @classmethod
    def from_call(cls, call: Call, sequence_number: int, resolution: Resolution) -> "Invocation":
        return cls(
            method_name=call.method_name,
            arguments=call.arguments,
            sequence_number=sequence_number,
            resolution=resolution,
        )

    @property
    def call(self) -> Call:
        return Call(method_name=self.method_name, arguments=self.arguments)

    def mark_verified(self) -> "Invocation":
        # only ever moves to True
        if not self.verified_by_history:
            self.verified_by_history = True
        return self

    def render(self, type_name: str) -> str:
        return f"{type_name}.{self.method_name}({format_arguments(self.arguments)})"

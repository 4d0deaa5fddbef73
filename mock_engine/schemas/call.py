from typing import Any, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def format_argument(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return repr(value)


def format_arguments(arguments: Iterable[Any]) -> str:
    """("A", 1) -> '"A", 1'"""
    return ", ".join(format_argument(a) for a in arguments)


def same_arguments(left: Tuple[Any, ...], right: Tuple[Any, ...]) -> bool:
    # 1, True and 1.0 are distinct literals
    return len(left) == len(right) and all(
        type(a) is type(b) and a == b for a, b in zip(left, right)
    )


class Call(BaseModel):
    """One call as seen by the engine: a method name plus literal positional arguments."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    method_name: str = Field(..., min_length=1)
    arguments: Tuple[Any, ...] = Field(default_factory=tuple)

    @field_validator("arguments", mode="before")
    @classmethod
    def _as_tuple(cls, v):
        if v is None:
            return ()
        if isinstance(v, (str, bytes)):
            # a bare string is one argument, not a sequence of characters
            return (v,)
        return tuple(v)

    def render(self, type_name: str) -> str:
        return f"{type_name}.{self.method_name}({format_arguments(self.arguments)})"


class CallMatcher(Call):
    """Structural-equality predicate over (method_name, arguments)."""

    def matches(self, call: Call) -> bool:
        return self.method_name == call.method_name and same_arguments(self.arguments, call.arguments)

    def same_shape(self, other: "CallMatcher") -> bool:
        return self.matches(other)

    def describe(self) -> str:
        return f"x => x.{self.method_name}({format_arguments(self.arguments)})"

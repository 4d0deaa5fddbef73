from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Times(BaseModel):
    """Accepted range of invocation counts, `upper=None` meaning unbounded."""

    model_config = ConfigDict(frozen=True)

    lower: int = Field(default=1, ge=0)
    upper: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> "Times":
        if self.upper is not None and self.upper < self.lower:
            raise ValueError("upper bound cannot be below lower bound")
        return self

    # ---- constructors ----
    @classmethod
    def never(cls) -> "Times":
        return cls(lower=0, upper=0)

    @classmethod
    def once(cls) -> "Times":
        return cls(lower=1, upper=1)

    @classmethod
    def at_least_once(cls) -> "Times":
        return cls(lower=1)

    @classmethod
    def exactly(cls, n: int) -> "Times":
        return cls(lower=n, upper=n)

    @classmethod
    def at_least(cls, n: int) -> "Times":
        return cls(lower=n)

    @classmethod
    def at_most(cls, n: int) -> "Times":
        return cls(lower=0, upper=n)

    @classmethod
    def between(cls, lower: int, upper: int) -> "Times":
        return cls(lower=lower, upper=upper)

    def verify(self, count: int) -> bool:
        if count < self.lower:
            return False
        return self.upper is None or count <= self.upper

    def describe(self) -> str:
        if self.upper == 0:
            return "should never have been performed"
        if self.upper is None:
            return "at least once" if self.lower == 1 else f"at least {self.lower} times"
        if self.lower == self.upper:
            return "once" if self.lower == 1 else f"exactly {self.lower} times"
        if self.lower == 0:
            return "at most once" if self.upper == 1 else f"at most {self.upper} times"
        return f"between {self.lower} and {self.upper} times"

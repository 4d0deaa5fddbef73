from __future__ import annotations

from typing import Any, Callable

from mock_engine.schemas.call import Call


class ResponseProducer:
    """Produces the result of one matched call."""

    def produce(self, call: Call) -> Any:
        raise NotImplementedError


class ReturnValue(ResponseProducer):
    def __init__(self, value: Any) -> None:
        self.value = value

    def produce(self, call: Call) -> Any:
        return self.value

    def __repr__(self) -> str:
        return f"ReturnValue({self.value!r})"


class ComputeValue(ResponseProducer):
    """Calls `func` with the call's arguments."""

    def __init__(self, func: Callable[..., Any]) -> None:
        if not callable(func):
            raise TypeError("func must be callable")
        self.func = func

    def produce(self, call: Call) -> Any:
        return self.func(*call.arguments)

    def __repr__(self) -> str:
        return f"ComputeValue({getattr(self.func, '__name__', self.func)!r})"


class RaiseError(ResponseProducer):
    def __init__(self, exc: BaseException) -> None:
        if not isinstance(exc, BaseException):
            raise TypeError("exc must be an exception instance")
        self.exc = exc

    def produce(self, call: Call) -> Any:
        raise self.exc

    def __repr__(self) -> str:
        return f"RaiseError({self.exc!r})"


def as_producer(response: Any) -> ResponseProducer:
    """Wrap a literal response; producers pass through unchanged."""
    if isinstance(response, ResponseProducer):
        return response
    return ReturnValue(response)

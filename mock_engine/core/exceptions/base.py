"""
Exception classes raised by the mock engine.
"""
from typing import Any, List, Optional


class MockException(Exception):
    """Base exception for all mock engine failures"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class InvocationFailure(MockException):
    """A Strict mock received a call with no corresponding setup"""

    def __init__(self, message: str, invocation: Optional[Any] = None):
        super().__init__(message)
        self.invocation = invocation


class VerificationFailure(MockException):
    """Verification found missing or unverified calls"""

    def __init__(self, message: str, failures: Optional[List[Any]] = None):
        super().__init__(message)
        self.failures = list(failures or [])


class SetupError(MockException):
    """A setup handle was used in a way the registry cannot honour"""
    pass

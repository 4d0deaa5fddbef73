from .core.config import LogLevel, MockBehavior, Settings, configure_logging, settings
from .core.exceptions.base import InvocationFailure, MockException, SetupError, VerificationFailure

from .schemas.call import Call, CallMatcher
from .schemas.invocation import Invocation, Resolution
from .schemas.responses import ComputeValue, RaiseError, ResponseProducer, ReturnValue
from .schemas.sequence import MockSequence
from .schemas.setup import Setup
from .schemas.times import Times

from .infrastructure.invocation_log.invocation_log import InvocationLog
from .infrastructure.registry.sequence_cursor import SequenceCursor
from .infrastructure.registry.setup_registry import SetupRegistry

from .services.mock_engine import MockEngine
from .services.setup_handles import SequenceSetupHandle, SetupHandle
from .services.verifier import Verifier
from .services.operations import (
    create_mock,
    in_sequence,
    invoke,
    setup,
    setup_sequence,
    verify,
    verify_all,
    verify_invoked,
    verify_no_other_calls,
)

from .test_doubles.base import EngineBackedDouble


__all__ = [

    # core/
    "LogLevel",
    "MockBehavior",
    "Settings",
    "configure_logging",
    "settings",
    "InvocationFailure",
    "MockException",
    "SetupError",
    "VerificationFailure",

    # schemas/
    "Call",
    "CallMatcher",
    "ComputeValue",
    "Invocation",
    "MockSequence",
    "RaiseError",
    "Resolution",
    "ResponseProducer",
    "ReturnValue",
    "Setup",
    "Times",

    # infrastructure/
    "InvocationLog",
    "SequenceCursor",
    "SetupRegistry",

    # services/
    "MockEngine",
    "SequenceSetupHandle",
    "SetupHandle",
    "Verifier",
    "create_mock",
    "in_sequence",
    "invoke",
    "setup",
    "setup_sequence",
    "verify",
    "verify_all",
    "verify_invoked",
    "verify_no_other_calls",

    # test_doubles/
    "EngineBackedDouble",
]

import pytest

from mock_engine.infrastructure.invocation_log.invocation_log import InvocationLog
from mock_engine.schemas.call import Call
from mock_engine.schemas.invocation import Resolution


def call(*args):
    return Call(method_name="DoTheThing", arguments=args)


@pytest.fixture
def log():
    log = InvocationLog()
    log.append(call("A"), Resolution.matched_setup(1))
    log.append(call("B"), Resolution.unmatched())
    log.append(call("A"), Resolution.matched_setup(1))
    log.append(call("C"), Resolution.matched_setup(2))
    return log


def test_sequence_numbers_are_global_and_start_at_one(log):
    assert [i.sequence_number for i in log] == [1, 2, 3, 4]


def test_cross_reference_by_setup(log):
    assert [i.sequence_number for i in log.for_setups([1])] == [1, 3]
    assert [i.sequence_number for i in log.for_setups([1, 2])] == [1, 3, 4]


def test_unverified_in_call_order(log):
    log[0].mark_verified()
    assert [i.sequence_number for i in log.unverified()] == [2, 3, 4]


def test_matching_ignores_resolution(log):
    assert [i.sequence_number for i in log.matching(call("A"))] == [1, 3]
    assert log.matching(call("Z")) == []


def test_matching_distinguishes_argument_types():
    log = InvocationLog()
    log.append(call(1), Resolution.unmatched())
    log.append(call(True), Resolution.unmatched())
    log.append(call(1.0), Resolution.unmatched())
    assert [i.sequence_number for i in log.matching(call(True))] == [2]


def test_iteration_is_a_snapshot(log):
    snapshot = iter(log)
    log.append(call("D"), Resolution.unmatched())
    assert len(list(snapshot)) == 4
    assert len(log) == 5

import pytest

from mock_engine.infrastructure.registry.sequence_cursor import SequenceCursor
from mock_engine.infrastructure.registry.setup_registry import SetupRegistry
from mock_engine.schemas.call import Call
from mock_engine.schemas.responses import ReturnValue
from mock_engine.schemas.setup import build_setup


def call(method="DoTheThing", *args):
    return Call(method_name=method, arguments=args)


def make_setup(arg, result=None, **kw):
    responses = [ReturnValue(result)] if result is not None else []
    return build_setup("DoTheThing", (arg,), responses, **kw)


class TestSequenceCursor:
    @pytest.fixture
    def cursor(self):
        cursor = SequenceCursor("seq")
        cursor.append(make_setup("B", sequence_id="seq"))
        cursor.append(make_setup("A", sequence_id="seq"))
        return cursor

    def test_only_head_is_eligible(self, cursor):
        assert cursor.head_index == 0
        assert cursor.head_accepts(call("DoTheThing", "B"))
        assert not cursor.head_accepts(call("DoTheThing", "A"))

    def test_advance_moves_by_one(self, cursor):
        first = cursor.advance()
        assert first.matcher.arguments == ("B",)
        assert cursor.head_index == 1
        assert cursor.head_accepts(call("DoTheThing", "A"))

    def test_exhausted_cursor_accepts_nothing(self, cursor):
        cursor.advance(); cursor.advance()
        assert cursor.exhausted
        assert not cursor.head_accepts(call("DoTheThing", "A"))
        with pytest.raises(IndexError):
            cursor.advance()


class TestRegisterOverride:
    @pytest.fixture
    def registry(self):
        return SetupRegistry()

    def test_ids_are_monotonic(self, registry):
        first = registry.register(make_setup("A"))
        second = registry.register(make_setup("B"))
        assert (first.id, second.id) == (1, 2)

    def test_equal_matcher_supersedes_previous(self, registry):
        old = registry.register(make_setup("A", "1", verifiable=True))
        other = registry.register(make_setup("B", "2"))
        new = registry.register(make_setup("A", "3", verifiable=True))

        assert old.superseded and not old.is_live
        assert registry.superseded == [old]
        # replaced in the same slot
        assert list(registry.live_setups()) == [new, other]
        assert len(registry) == 2

    def test_equal_but_differently_typed_arguments_do_not_override(self, registry):
        as_int = registry.register(make_setup(1, "int", verifiable=True))
        as_bool = registry.register(make_setup(True, "bool"))

        assert as_int.is_live and as_bool.is_live
        assert list(registry.live_setups()) == [as_int, as_bool]

    def test_sequence_members_never_override(self, registry):
        a1 = registry.register(make_setup("A", "1", sequence_id="s"))
        a2 = registry.register(make_setup("A", "2", sequence_id="s"))
        assert not a1.superseded and not a2.superseded
        assert registry.cursor("s").members == [a1, a2]

    def test_sequence_setup_does_not_override_pool_setup(self, registry):
        pooled = registry.register(make_setup("A", "1"))
        registry.register(make_setup("A", "2", sequence_id="s"))
        assert pooled.is_live


class TestResolve:
    @pytest.fixture
    def registry(self):
        return SetupRegistry()

    def test_pool_match_counts_and_consumes_response(self, registry):
        setup = registry.register(make_setup("A", "1"))

        result = registry.resolve(call("DoTheThing", "A"))

        assert result.is_matched
        assert result.setup is setup
        assert result.resolution.setup_id == setup.id
        assert result.response.value == "1"
        assert setup.match_count == 1
        assert setup.responses == []

    def test_exhausted_queue_still_matches_without_response(self, registry):
        setup = registry.register(make_setup("A", "1"))
        registry.resolve(call("DoTheThing", "A"))

        result = registry.resolve(call("DoTheThing", "A"))

        assert result.is_matched and result.response is None
        assert setup.match_count == 2

    def test_unmatched(self, registry):
        registry.register(make_setup("A", "1"))
        result = registry.resolve(call("DoTheThing", "Z"))
        assert not result.is_matched
        assert result.setup is None

    def test_superseded_setup_never_resolves(self, registry):
        old = registry.register(make_setup("A", "1"))
        new = registry.register(make_setup("A", "2"))

        result = registry.resolve(call("DoTheThing", "A"))

        assert result.setup is new
        assert old.match_count == 0

    def test_argument_types_must_match(self, registry):
        as_int = registry.register(make_setup(1, "int"))
        registry.register(make_setup(True, "bool"))

        result = registry.resolve(call("DoTheThing", 1))

        assert result.setup is as_int
        assert result.response.value == "int"
        assert not registry.resolve(call("DoTheThing", 1.0)).is_matched

    def test_sequence_head_wins_over_pool(self, registry):
        pooled = registry.register(make_setup("A", "pool"))
        ordered = registry.register(make_setup("A", "seq", sequence_id="s"))

        first = registry.resolve(call("DoTheThing", "A"))
        second = registry.resolve(call("DoTheThing", "A"))

        assert first.setup is ordered
        assert second.setup is pooled

    def test_non_head_member_is_unmatched(self, registry):
        registry.register(make_setup("B", "1", sequence_id="s"))
        later = registry.register(make_setup("A", "2", sequence_id="s"))

        result = registry.resolve(call("DoTheThing", "A"))

        assert not result.is_matched
        assert later.match_count == 0
        assert registry.cursor("s").head_index == 0

    def test_same_shape_members_resolve_in_order(self, registry):
        s1 = registry.register(make_setup("X", "1", sequence_id="s"))
        s2 = registry.register(make_setup("X", "2", sequence_id="s"))

        assert registry.resolve(call("DoTheThing", "X")).setup is s1
        assert registry.resolve(call("DoTheThing", "X")).setup is s2
        assert not registry.resolve(call("DoTheThing", "X")).is_matched

    def test_independent_sequences_advance_independently(self, registry):
        registry.register(make_setup("A", "1", sequence_id="left"))
        right = registry.register(make_setup("B", "2", sequence_id="right"))

        assert registry.resolve(call("DoTheThing", "B")).setup is right
        assert registry.cursor("left").head_index == 0
        assert registry.cursor("right").head_index == 1

    def test_get_by_id(self, registry):
        setup = registry.register(make_setup("A"))
        assert registry.get(setup.id) is setup
        assert registry.get(999) is None

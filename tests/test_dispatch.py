"""
Tests for the sequence dispatcher.

These tests verify:
    - Routing to the nil/cons handler
    - Forwarding of extra arguments
    - ArityError for incomplete handler sets
    - Iterative traversal with argument threading
    - No output on failure
"""

import pytest
from cdeclgen.dispatch import Handlers, SequenceHandler, Step, dispatch, traverse
from cdeclgen.errors import ArityError, MalformedSequenceError, TypeMismatchError
from cdeclgen.sequence import Cons, Fragment, from_iterable, nil, seq_list


class Numbered(SequenceHandler):
    """Emit head + index for every term."""

    def nil(self, i):
        return Fragment.empty()

    def cons(self, head, tail, i):
        return Step(Fragment(f"{head}{i}"), (i + 1,))


class OnlyNil(SequenceHandler):
    def nil(self, *args):
        return "nil"


class TestDispatch:
    """Test one routing step."""

    def test_nil_routes_to_nil_handler(self):
        handlers = Handlers(nil=lambda *a: ("nil", a), cons=lambda h, t, *a: ("cons", h, a))
        assert dispatch(nil(), handlers, 1, 2) == ("nil", (1, 2))

    def test_cons_routes_to_cons_handler(self):
        """cons receives head, rest and the extra arguments unchanged."""
        seen = {}

        def on_cons(head, tail, *args):
            seen.update(head=head, tail=tail, args=args)
            return "cons"

        seq = seq_list("int", "long")
        assert dispatch(seq, Handlers(nil=lambda *a: "nil", cons=on_cons), "x") == "cons"
        assert seen == {"head": "int", "tail": seq_list("long"), "args": ("x",)}

    def test_missing_cons_handler_is_arity_error(self):
        """A handler set must implement both variants."""
        with pytest.raises(ArityError) as excinfo:
            dispatch(nil(), OnlyNil())
        assert "cons" in excinfo.value.expected

    def test_missing_attribute_is_arity_error(self):
        class NoHandlers:
            pass

        with pytest.raises(ArityError):
            dispatch(seq_list("a"), NoHandlers())

    def test_non_callable_handler_is_arity_error(self):
        with pytest.raises(ArityError):
            dispatch(nil(), Handlers(nil="not callable", cons=lambda *a: None))

    def test_non_sequence_is_type_mismatch(self):
        with pytest.raises(TypeMismatchError) as excinfo:
            dispatch(["int"], Numbered(), 0)
        assert excinfo.value.operation == "dispatch"

    def test_malformed_cons(self):
        with pytest.raises(MalformedSequenceError):
            dispatch(Cons("int", 42), Numbered(), 0)


class TestTraverse:
    """Test full traversal with a threaded counter."""

    def test_counter_threads_in_order(self):
        result = traverse(seq_list("a", "b", "c"), Numbered(), 0, separator=" ")
        assert result == "a0 b1 c2"

    def test_counter_start_is_caller_supplied(self):
        assert traverse(seq_list("a", "b"), Numbered(), 5, separator=",") == "a5,b6"

    def test_empty_sequence_yields_nil_piece(self):
        handlers = Handlers(nil=lambda i: Fragment(f"end{i}"), cons=lambda h, t, i: Step(h, (i + 1,)))
        assert traverse(nil(), handlers, 0) == "end0"
        assert traverse(seq_list("x"), handlers, 0, separator="|") == "x|end1"

    def test_result_is_fragment(self):
        assert isinstance(traverse(seq_list("a"), Numbered(), 0), Fragment)

    def test_cons_must_return_step(self):
        handlers = Handlers(nil=lambda *a: "", cons=lambda h, t, *a: "not a step")
        with pytest.raises(TypeMismatchError):
            traverse(seq_list("a"), handlers)

    def test_malformed_tail_raises_without_output(self):
        """No partial fragment escapes a failed traversal."""
        calls = []

        def on_cons(head, tail, i):
            calls.append(head)
            return Step(head, (i + 1,))

        bad = Cons("a", Cons("b", "broken"))
        with pytest.raises(MalformedSequenceError):
            traverse(bad, Handlers(nil=lambda i: "", cons=on_cons), 0)
        assert calls == ["a"]

    def test_long_sequence_does_not_recurse(self):
        """Depth does not grow with sequence length."""
        seq = from_iterable(["t"] * 100_000)
        result = traverse(seq, Numbered(), 0, separator=" ")
        assert result.endswith("t99999")
        assert result.count(" ") == 99_999

"""
Dispatcher: pattern matching over a Sequence with extra arguments.

dispatch() performs one routing step:

    Nil         -> handlers.nil(*args)
    Cons(h, t)  -> handlers.cons(h, t, *args)

traverse() walks a whole Sequence without recursion. Each cons handler
returns a Step: the Fragment for the head and the extra arguments to
pass on to the rest. The extra arguments are the fold accumulator; a
handler extends them (e.g. increments an index) instead of touching
shared state.

Example (number every term):

    class Numbered(SequenceHandler):
        def nil(self, i):
            return Fragment.empty()

        def cons(self, head, tail, i):
            return Step(Fragment(f"{head}{i}"), (i + 1,))

    traverse(seq_list("a", "b"), Numbered(), 0, separator=" ")  # "a0 b1"
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from .errors import ArityError, MalformedSequenceError, TypeMismatchError
from .sequence import Cons, Fragment, Nil, Sequence


class SequenceHandler:
    """
    A handler set for dispatch()/traverse().

    Subclasses must implement both variants. Leaving either
    unimplemented is an ArityError at dispatch time.
    """

    def nil(self, *args: Any) -> Any:
        raise NotImplementedError

    def cons(self, head: Any, tail: Sequence, *args: Any) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Handlers:
    """A handler set made of two plain functions."""

    nil: Callable[..., Any]
    cons: Callable[..., Any]


@dataclass(frozen=True)
class Step:
    """
    Result of one traversal step.

    Properties:
        fragment: Output for the current head
        args: Extra arguments threaded to the rest of the sequence
    """

    fragment: str
    args: Tuple[Any, ...] = ()


def _resolve_handler(handlers: Any, variant: str, operation: str) -> Callable[..., Any]:
    handler = getattr(handlers, variant, None)
    if not callable(handler):
        raise ArityError(operation, f"a '{variant}' handler", type(handlers).__name__)
    # A SequenceHandler subclass that left the variant abstract
    if isinstance(handlers, SequenceHandler) and getattr(type(handlers), variant) is getattr(SequenceHandler, variant):
        raise ArityError(operation, f"a '{variant}' handler", type(handlers).__name__)
    return handler


def _check_handlers(handlers: Any, operation: str) -> None:
    _resolve_handler(handlers, "nil", operation)
    _resolve_handler(handlers, "cons", operation)


def dispatch(seq: Sequence, handlers: Any, *args: Any) -> Any:
    """
    Route seq to the handler for its variant.

    Args:
        seq: Sequence to match on
        handlers: Object with callable nil and cons attributes
        *args: Extra arguments forwarded unchanged to the handler

    Returns:
        Whatever the selected handler returns

    Raises:
        ArityError: handlers lacks one of the two variants
        TypeMismatchError: seq is not a Sequence
        MalformedSequenceError: seq is a Cons with a non-Sequence tail
    """
    _check_handlers(handlers, "dispatch")

    if isinstance(seq, Nil):
        return handlers.nil(*args)
    if isinstance(seq, Cons):
        if not isinstance(seq.tail, Sequence):
            raise MalformedSequenceError("dispatch", "a Sequence as the rest of a Cons", seq.tail)
        return handlers.cons(seq.head, seq.tail, *args)
    raise TypeMismatchError("dispatch", "a Sequence", seq)


def traverse(seq: Sequence, handlers: Any, *args: Any, separator: str = "", operation: str = "traverse") -> Fragment:
    """
    Walk seq iteratively, threading extra arguments from step to step.

    Args:
        seq: Sequence to walk
        handlers: Handler set; cons must return a Step, nil a fragment
        *args: Initial extra arguments
        separator: Text placed between non-empty pieces
        operation: Name reported in errors

    Returns:
        Pieces joined in traversal order, nil's piece last

    Raises:
        Same as dispatch(), plus TypeMismatchError if a cons handler
        does not return a Step. Nothing is returned on failure.
    """
    if not isinstance(seq, Sequence):
        raise TypeMismatchError(operation, "a Sequence", seq)
    _check_handlers(handlers, operation)

    pieces: List[str] = []
    node: Sequence = seq
    while isinstance(node, Cons):
        step = dispatch(node, handlers, *args)
        if not isinstance(step, Step):
            raise TypeMismatchError(operation, "cons handler returning a Step", step)
        pieces.append(step.fragment)
        args = tuple(step.args)
        node = node.tail

    if not isinstance(node, Nil):
        raise TypeMismatchError(operation, "a Sequence", node)
    pieces.append(dispatch(node, handlers, *args))
    return Fragment.join_pieces(pieces, separator)

"""
Sequence Abstraction for cdeclgen

Every list-shaped input to the generators (type lists, term lists) is a
Sequence: an immutable, ordered, finite chain of opaque terms with
exactly two variants:

    Nil           - the empty sequence
    Cons(h, t)    - a head term followed by the rest of the sequence

Order is significant: it decides which index each term receives.

Generated output is a Fragment, an immutable piece of C text.

ARCHITECTURAL RULE:
    Sequences are consumed, never mutated.
    Terms are opaque. This module never inspects them.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List

from .errors import MalformedSequenceError, TypeMismatchError


class Sequence(ABC):
    """
    Base class of the two sequence variants.

    This class is structure only. Traversal lives in cdeclgen.dispatch.
    """
    pass


@dataclass(frozen=True)
class Nil(Sequence):
    """
    The empty sequence.

    All Nil instances compare equal.
    """

    def __repr__(self) -> str:
        return "nil()"


@dataclass(frozen=True, eq=False, repr=False)
class Cons(Sequence):
    """
    A head term followed by the rest of a sequence.

    Properties:
        head: The first term (opaque, usually a C type string)
        tail: The remaining Sequence

    IMPORTANT:
        The constructor does NOT validate tail.
        A Cons whose tail is not a Sequence is malformed and is
        rejected when it is traversed (MalformedSequenceError).

    Equality, hashing and repr walk the chain in a loop, so they work
    on sequences of any length.
    """

    head: Any
    tail: "Sequence"

    def _unwind(self):
        # (heads, end) where end is the first non-Cons tail
        heads = []
        node = self
        while isinstance(node, Cons):
            heads.append(node.head)
            node = node.tail
        return heads, node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cons):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Cons) and isinstance(b, Cons):
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        if isinstance(a, Cons) or isinstance(b, Cons):
            return False
        return a == b

    def __hash__(self) -> int:
        heads, end = self._unwind()
        return hash((tuple(heads), end))

    def __repr__(self) -> str:
        heads, end = self._unwind()
        if isinstance(end, Nil):
            return f"seq_list({', '.join(repr(h) for h in heads)})"
        # malformed: show the bad tail
        opened = "".join(f"Cons({h!r}, " for h in heads)
        return f"{opened}{end!r}{')' * len(heads)}"


_NIL = Nil()


def nil() -> Nil:
    """Return the empty sequence."""
    return _NIL


def cons(head: Any, tail: Sequence) -> Cons:
    """Prepend head to tail."""
    return Cons(head, tail)


def from_iterable(terms: Iterable[Any]) -> Sequence:
    """
    Build a Sequence holding terms in iteration order.

    Built back to front, so arbitrarily long inputs are fine.
    """
    if isinstance(terms, (str, bytes)):
        raise TypeMismatchError("from_iterable", "an iterable of terms", terms)
    items = list(terms)
    seq: Sequence = _NIL
    for term in reversed(items):
        seq = Cons(term, seq)
    return seq


def seq_list(*terms: Any) -> Sequence:
    """
    Build a Sequence from positional terms.

    Example:
        seq_list("int", "long long", "const char *")
    """
    return from_iterable(terms)


def is_nil(seq: Sequence) -> bool:
    return isinstance(seq, Nil)


def iter_terms(seq: Sequence) -> Iterator[Any]:
    """
    Yield the terms of seq in order.

    Raises:
        TypeMismatchError: seq is not a Sequence
        MalformedSequenceError: some Cons has a non-Sequence tail
    """
    if not isinstance(seq, Sequence):
        raise TypeMismatchError("iter_terms", "a Sequence", seq)
    node = seq
    while isinstance(node, Cons):
        yield node.head
        if not isinstance(node.tail, Sequence):
            raise MalformedSequenceError("iter_terms", "a Sequence as the rest of a Cons", node.tail)
        node = node.tail


def to_list(seq: Sequence) -> List[Any]:
    return list(iter_terms(seq))


def length(seq: Sequence) -> int:
    count = 0
    for _ in iter_terms(seq):
        count += 1
    return count


class Fragment(str):
    """
    An immutable piece of generated C text.

    Fragment is a str, so it compares equal to the plain text it holds
    and can be substituted anywhere text is expected. Concatenating two
    Fragments gives a Fragment.
    """

    __slots__ = ()

    def __add__(self, other: str) -> "Fragment":
        return Fragment(str.__add__(self, other))

    def __radd__(self, other: str) -> "Fragment":
        return Fragment(str.__add__(str(other), self))

    def __repr__(self) -> str:
        return f"Fragment({str.__repr__(self)})"

    @classmethod
    def empty(cls) -> "Fragment":
        return cls("")

    @classmethod
    def join_pieces(cls, pieces: Iterable[str], separator: str = "") -> "Fragment":
        """Concatenate pieces in order with separator, skipping empty ones."""
        return cls(separator.join(piece for piece in pieces if piece))

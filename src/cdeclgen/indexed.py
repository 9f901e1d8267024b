"""
Indexed name and declaration emitters.

Four related generators that give the k-th element the identifier _k:

    indexed_params(seq_list("int", "long"))  -> (int _0, long _1)
    indexed_fields(seq_list("int", "long"))  -> int _0; long _1;
    indexed_initializer_list(3)              -> {_0, _1, _2}
    indexed_args(3)                          -> _0, _1, _2

The empty cases differ on purpose and must stay that way:

    indexed_params(nil())        -> (void)
    indexed_fields(nil())        -> ""
    indexed_initializer_list(0)  -> {0}
    indexed_args(0)              -> ""
"""

from typing import Any

from .declarations import braced
from .dispatch import SequenceHandler, Step, traverse
from .errors import TypeMismatchError
from .sequence import Fragment, Sequence, is_nil


def indexed_name(i: int) -> str:
    """The identifier given to element i."""
    return f"_{i}"


class _IndexedParams(SequenceHandler):
    def nil(self, i: int) -> Fragment:
        return Fragment.empty()

    def cons(self, head: Any, tail: Sequence, i: int) -> Step:
        return Step(Fragment(f"{head} {indexed_name(i)}"), (i + 1,))


class _IndexedFields(SequenceHandler):
    def nil(self, i: int) -> Fragment:
        return Fragment.empty()

    def cons(self, head: Any, tail: Sequence, i: int) -> Step:
        return Step(Fragment(f"{head} {indexed_name(i)};"), (i + 1,))


def indexed_params(type_list: Sequence) -> Fragment:
    """
    Generate a parameter list (T0 _0, ..., Tn _n).

    An empty type_list gives (void).
    """
    if not isinstance(type_list, Sequence):
        raise TypeMismatchError("indexedParams", "a Sequence of types", type_list)
    if is_nil(type_list):
        return Fragment("(void)")
    params = traverse(type_list, _IndexedParams(), 0, separator=", ", operation="indexedParams")
    return Fragment(f"({params})")


def indexed_fields(type_list: Sequence) -> Fragment:
    """
    Generate field declarations T0 _0; ...; Tn _n;

    An empty type_list gives an empty fragment.
    """
    if not isinstance(type_list, Sequence):
        raise TypeMismatchError("indexedFields", "a Sequence of types", type_list)
    return traverse(type_list, _IndexedFields(), 0, separator=" ", operation="indexedFields")


def _check_count(n: Any, operation: str) -> int:
    # bool is an int subclass but never a count
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise TypeMismatchError(operation, "a non-negative integer count", n)
    return n


def _indexed_items(n: int) -> Fragment:
    return Fragment.join_pieces((indexed_name(i) for i in range(n)), ", ")


def indexed_initializer_list(n: int) -> Fragment:
    """
    Generate {_0, ..., _n-1}.

    n == 0 gives {0}, the smallest valid initializer.
    """
    n = _check_count(n, "indexedInitializerList")
    if n == 0:
        return braced("0")
    return braced(_indexed_items(n))


def indexed_args(n: int) -> Fragment:
    """Generate _0, ..., _n-1; empty when n == 0."""
    n = _check_count(n, "indexedArgs")
    if n == 0:
        return Fragment.empty()
    return _indexed_items(n)

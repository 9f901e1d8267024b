"""
Declaration wrapper emitters.

One parameterised emitter, wrap(), plus thin specialisations:

    braced("int a, b, c;")              -> {int a, b, c;}
    typedef("Point", "struct {int x;}")   -> typedef struct {int x;} Point;
    struct("Point", "int x, y;")        -> struct Point{int x, y;}
    anon_struct("int x, y;")            -> struct {int x, y;}

union/enum and their anonymous forms follow struct exactly.
The body is never parsed or validated.
"""


from typing import Any, Optional

from .errors import TypeMismatchError
from .sequence import Fragment, Sequence


def _check_name(name: Any, operation: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise TypeMismatchError(operation, "a non-empty name string", name)
    return name


def _check_body(body: Any, operation: str) -> Any:
    # A Sequence is a list of terms, not text; render it with an indexed emitter first
    if isinstance(body, Sequence):
        raise TypeMismatchError(operation, "a declaration body fragment, not a Sequence", body)
    return body


def wrap(keyword: Optional[str], name: Optional[str], body: Any, operation: str = "wrap") -> Fragment:
    """
    Frame body as "keyword name{body}".

    Args:
        keyword: "struct", "union", "enum", or None for bare braces
        name: Tag name, or None for an anonymous declaration.
            A name without a keyword is rejected.
        body: Declaration body, emitted verbatim
        operation: Name reported in errors

    Returns:
        Fragment with the framed declaration

    Raises:
        TypeMismatchError: body is a Sequence, or name given without keyword
    """
    body = _check_body(body, operation)
    if keyword is None:
        if name is not None:
            raise TypeMismatchError(operation, "no name for a bare braced body", name)
        head = ""
    elif name is None:
        head = f"{keyword} "
    else:
        head = f"{keyword} {name}"
    return Fragment(f"{head}{{{body}}}")


def braced(body: Any) -> Fragment:
    return wrap(None, None, body, operation="braced")


def typedef(name: str, body: Any) -> Fragment:
    """Generate "typedef body name;"."""
    name = _check_name(name, "typedef")
    body = _check_body(body, "typedef")
    return Fragment(f"typedef {body} {name};")


def struct(name: str, body: Any) -> Fragment:
    return wrap("struct", _check_name(name, "struct"), body, operation="struct")


def anon_struct(body: Any) -> Fragment:
    return wrap("struct", None, body, operation="anonStruct")


def union(name: str, body: Any) -> Fragment:
    return wrap("union", _check_name(name, "union"), body, operation="union")


def anon_union(body: Any) -> Fragment:
    return wrap("union", None, body, operation="anonUnion")


def enum(name: str, body: Any) -> Fragment:
    return wrap("enum", _check_name(name, "enum"), body, operation="enum")


def anon_enum(body: Any) -> Fragment:
    return wrap("enum", None, body, operation="anonEnum")

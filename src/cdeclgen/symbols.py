"""
Hygienic symbol generator.

C macros have no hygiene, so generated code names its private
variables by pasting a prefix, a short id and the source position
together:

    gen_sym("MY_MACRO_", "x", 12)   -> MY_MACRO_x_12

Within one expansion the same (prefix, id, position) always gives the
same name, so a single variable can be referenced several times.
Expansions at different positions never collide.

The function is pure. There is no counter and no registry of issued
names.
"""

import inspect
import re
from dataclasses import dataclass
from typing import Optional, Union

from .errors import TypeMismatchError

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_ID_PART_RE = re.compile(r"^[A-Za-z0-9_]*$")


@dataclass(frozen=True)
class SourcePosition:
    """
    A source coordinate used to tell expansions apart.

    Properties:
        line: Line number (the coordinate C's __LINE__ gives)
        column: Optional column, when the caller knows it
        file: Optional file name, for positions across files
    """

    line: int
    column: Optional[int] = None
    file: Optional[str] = None


Position = Union[int, SourcePosition]


def _check_coordinate(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TypeMismatchError("gen_sym", f"a non-negative integer {what}", value)
    return value


def _normalize_position(position: Position) -> SourcePosition:
    if isinstance(position, SourcePosition):
        pos = position
    elif isinstance(position, int) and not isinstance(position, bool):
        pos = SourcePosition(line=position)
    else:
        raise TypeMismatchError("gen_sym", "a line number or SourcePosition", position)

    _check_coordinate(pos.line, "line")
    if pos.column is not None:
        _check_coordinate(pos.column, "column")
    if pos.file is not None and not isinstance(pos.file, str):
        raise TypeMismatchError("gen_sym", "a file name string", pos.file)
    return pos


def _file_tag(file: str) -> str:
    # hex of the UTF-8 bytes; reversible
    return file.encode("utf-8").hex()


def gen_sym(prefix: str, short_id: str, position: Position) -> str:
    """
    Paste prefix, short_id and position into a C identifier.

    Args:
        prefix: Namespace of the generating macro, e.g. "MY_MACRO_"
        short_id: Name of the variable inside that macro
        position: Line number or SourcePosition of the expansion

    Returns:
        prefix + short_id + "_" + line, then "_" + column if known,
        then "_f" + the hex-encoded file name if known

    Raises:
        TypeMismatchError: the parts do not form a C identifier
    """
    if not isinstance(prefix, str) or not isinstance(short_id, str):
        raise TypeMismatchError("gen_sym", "string prefix and id", (prefix, short_id))
    if not _ID_PART_RE.match(short_id) or not _IDENTIFIER_RE.match(prefix + short_id):
        raise TypeMismatchError("gen_sym", "prefix + id forming a C identifier", prefix + short_id)

    pos = _normalize_position(position)
    name = f"{prefix}{short_id}_{pos.line}"
    if pos.column is not None:
        name += f"_{pos.column}"
    if pos.file is not None:
        name += f"_f{_file_tag(pos.file)}"
    return name


def gen_sym_here(prefix: str, short_id: str) -> str:
    """
    gen_sym() at the caller's line.

    Only the line is used, so two calls on one line name the same
    variable, which nested generators rely on to share a binding.
    """
    frame = inspect.currentframe()
    try:
        caller = frame.f_back if frame is not None else None
        line = caller.f_lineno if caller is not None else 0
    finally:
        del frame
    return gen_sym(prefix, short_id, line)


@dataclass(frozen=True)
class SymbolKey:
    """The (prefix, short_id, position) triple behind a generated symbol."""

    prefix: str
    short_id: str
    position: Position

    @property
    def identifier(self) -> str:
        return gen_sym(self.prefix, self.short_id, self.position)

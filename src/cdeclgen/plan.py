"""
Declaration plans.

A Plan describes the contents of one generated header as data: a list
of declarations, each a tree of operation calls.

    Call("typedef", ["Point",
        Call("struct", ["Point", Call("indexedFields", [["int", "int"]])])])

evaluates to

    typedef struct Point{int _0; int _1;} Point;

Terms inside a Call are:
    - Call: evaluated through the operation registry
    - list/tuple: evaluated element-wise, then turned into a Sequence
    - Sequence: used as is
    - str/int: passed as is

ARCHITECTURAL RULE:
    Plans are structure only.
    Rendering a whole header belongs to cdeclgen.backends.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from . import registry
from .errors import GenerationError, PlanError
from .logging_utils import get_logger
from .sequence import Fragment, Sequence, from_iterable

logger = get_logger(__name__)


@dataclass(frozen=True)
class Call:
    """
    One operation call inside a plan.

    Properties:
        op: Registry name, e.g. "indexedFields"
        args: Argument terms, evaluated before the call
    """

    op: str
    args: List[Any] = field(default_factory=list)


Term = Union[Call, List[Any], Sequence, str, int]


@dataclass
class Declaration:
    """
    A top-level declaration in a plan.

    Properties:
        term: The term producing the declaration text
        comment: Optional comment emitted above it
    """

    term: Any
    comment: Optional[str] = None


@dataclass
class Plan:
    """
    Root container for one generated header.

    Properties:
        name: Plan identifier, used in the header banner
        declarations: Declarations in output order
        include_guard: Macro for #ifndef/#define, or None for no guard
        includes: Headers to #include, e.g. ["stddef.h"]
    """

    name: str
    declarations: List[Declaration] = field(default_factory=list)
    include_guard: Optional[str] = None
    includes: List[str] = field(default_factory=list)

    def add(self, term: Any, comment: Optional[str] = None) -> Declaration:
        declaration = Declaration(term=term, comment=comment)
        self.declarations.append(declaration)
        return declaration


def evaluate_term(term: Any) -> Any:
    """
    Evaluate a plan term.

    Raises:
        PlanError: term is not a plan term
        GenerationError: an operation rejected its arguments
    """
    if isinstance(term, Call):
        args = [evaluate_term(arg) for arg in term.args]
        return registry.call(term.op, *args)
    if isinstance(term, (list, tuple)):
        return from_iterable(evaluate_term(item) for item in term)
    if isinstance(term, (Sequence, str, int)) and not isinstance(term, bool):
        return term
    raise PlanError("evaluate_term", "a Call, list, Sequence, str or int", term)


def render_declaration(declaration: Declaration) -> Fragment:
    """Evaluate a declaration and terminate it with ';' if needed."""
    value = evaluate_term(declaration.term)
    if isinstance(value, Sequence):
        raise PlanError("render_declaration", "a term rendering to text, not a list", declaration.term)
    text = str(value).strip()
    if not text:
        raise PlanError("render_declaration", "a non-empty declaration", declaration.term)
    if not text.endswith(";"):
        text += ";"
    return Fragment(text)


def render_declarations(plan: Plan) -> List[Fragment]:
    """
    Render every declaration of plan, in order.

    Either all declarations render or an error is raised; no partial
    list is returned.
    """
    rendered = []
    for index, declaration in enumerate(plan.declarations):
        try:
            rendered.append(render_declaration(declaration))
        except GenerationError:
            logger.error("plan %r: declaration %d failed", plan.name, index)
            raise
    logger.info("plan %r: rendered %d declaration(s)", plan.name, len(rendered))
    return rendered

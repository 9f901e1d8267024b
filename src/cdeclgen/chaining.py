"""
Statement chaining prefixes for generated C.

A statement chaining prefix expects exactly one statement right after
it, and prefix + statement together form a single statement. That makes
a chain of prefixes usable anywhere C accepts one statement, e.g. as the
unbraced body of an if:

    if (ok)
        for (int x = 5, *ml99_priv_break = (void *)0; ...)   <- prefix
            for (int ml99_priv_expr_stmt_break = ((f(x)), 0); ...)
                puts("done");                                 <- statement

C has no scoped destructors, so every prefix is a for loop that runs
its body exactly once: a private flag starts "not run", the condition
holds while it is "not run", and the increment clause flips it to
"done".

The private flag names are fixed, so nested prefixes shadow each
other's flag. That is intended; each prefix is wrapped in pragmas that
silence -Wshadow for exactly that prefix (see shadows()).

See https://www.chiark.greenend.org.uk/~sgtatham/mp/ for the idea.
"""

import warnings
from typing import Iterable

from .errors import ArityError
from .logging_utils import get_logger
from .sequence import Fragment

logger = get_logger(__name__)

BREAK_FLAG = "ml99_priv_break"
EXPR_STMT_FLAG = "ml99_priv_expr_stmt_break"

_SHADOW_PUSH = '_Pragma("clang diagnostic push")'
_SHADOW_IGNORE = '_Pragma("clang diagnostic ignored \\"-Wshadow\\"")'
_SHADOW_POP = '_Pragma("clang diagnostic pop")'


def shadows(prefix: str) -> Fragment:
    """Wrap prefix in pragmas that allow it to shadow outer names."""
    return Fragment(f"{_SHADOW_PUSH} {_SHADOW_IGNORE} {prefix} {_SHADOW_POP}")


def _finish(prefix: str, suppress_shadow: bool) -> Fragment:
    if suppress_shadow:
        return shadows(prefix)
    return Fragment(prefix)


def _require_text(value: object, operation: str, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ArityError(operation, what, value)
    return value.strip()


def introduce_var_to_stmt(*declarations: str, suppress_shadow: bool = True) -> Fragment:
    """
    Introduce variable definitions scoped to the next statement.

    Args:
        *declarations: Declarations sharing one base type, e.g.
            "double x = 5.0", "y = 7.0"
        suppress_shadow: Wrap the prefix in -Wshadow pragmas

    Returns:
        for (<declarations>, *ml99_priv_break = (void *)0;
             ml99_priv_break != (void *)1; ml99_priv_break = (void *)1)

    Raises:
        ArityError: no declarations, or an empty one
    """
    if not declarations:
        raise ArityError("introduceVarToStmt", "at least one declaration", ())
    decls = ", ".join(_require_text(d, "introduceVarToStmt", "a non-empty declaration") for d in declarations)
    prefix = (
        f"for ({decls}, *{BREAK_FLAG} = (void *)0; "
        f"{BREAK_FLAG} != (void *)1; "
        f"{BREAK_FLAG} = (void *)1)"
    )
    return _finish(prefix, suppress_shadow)


def introduce_non_null_ptr_to_stmt(ty: str, name: str, init: str, suppress_shadow: bool = True) -> Fragment:
    """
    Introduce a non-NULL pointer scoped to the next statement.

    init is evaluated once. The pointer appears in the loop condition,
    so it never triggers an unused variable warning. A NULL init skips
    the statement.
    """
    ty = _require_text(ty, "introduceNonNullPtrToStmt", "a pointee type")
    name = _require_text(name, "introduceNonNullPtrToStmt", "a pointer name")
    init = _require_text(init, "introduceNonNullPtrToStmt", "an initializer")
    prefix = f"for ({ty} *{name} = ({init}); {name} != (void *)0; {name} = (void *)0)"
    return _finish(prefix, suppress_shadow)


def chain_expr_stmt(expr: str, suppress_shadow: bool = True) -> Fragment:
    """Evaluate expr once, for its side effect, before the next statement."""
    expr = _require_text(expr, "chainExprStmt", "an expression")
    prefix = (
        f"for (int {EXPR_STMT_FLAG} = (({expr}), 0); "
        f"{EXPR_STMT_FLAG} != 1; "
        f"{EXPR_STMT_FLAG} = 1)"
    )
    return _finish(prefix, suppress_shadow)


def suppress_unused_before_stmt(expr: str, suppress_shadow: bool = True) -> Fragment:
    """
    Silence "unused" warnings for expr before the next statement.

    Deprecated: use chain_expr_stmt("(void)" + expr).
    """
    warnings.warn(
        "suppress_unused_before_stmt() is deprecated; use chain_expr_stmt('(void)' + expr)",
        DeprecationWarning,
        stacklevel=2,
    )
    expr = _require_text(expr, "suppressUnusedBeforeStmt", "an expression")
    return chain_expr_stmt(f"(void){expr}", suppress_shadow=suppress_shadow)


def chain(prefixes: Iterable[str], statement: str, indent: str = "") -> Fragment:
    """
    Close a chain of prefixes with its final statement.

    Args:
        prefixes: Prefixes in source order; the first is outermost
        statement: The one statement the innermost prefix governs
        indent: If non-empty, put each part on its own line, nested
            one indent level deeper than the previous part

    Returns:
        A single C statement

    Raises:
        ArityError: statement is empty
    """
    statement = _require_text(statement, "chain", "a final statement")
    parts = [p for p in prefixes if p]
    parts.append(statement)
    logger.debug("chaining %d prefix(es)", len(parts) - 1)

    if not indent:
        return Fragment(" ".join(parts))
    return Fragment("\n".join(f"{indent * depth}{part}" for depth, part in enumerate(parts)))

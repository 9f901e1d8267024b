"""
C header generator for declaration plans.

Converts a Plan into the text of a C header:

    /* generated by cdeclgen: <plan name> */
    #ifndef GUARD
    #define GUARD

    #include <...>

    /* comment */
    declaration;

    #endif /* GUARD */
"""

import re
from typing import List

from cdeclgen.errors import PlanError
from cdeclgen.logging_utils import get_logger
from cdeclgen.plan import Plan, render_declarations

logger = get_logger(__name__)

_MACRO_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _escape_comment(text: str) -> str:
    """Keep comment text from closing the C comment early."""
    return text.replace("*/", "* /").replace("\n", " ")


def _include_line(header: str) -> str:
    # "foo.h" stays quoted, anything else goes in angle brackets
    if header.startswith('"') or header.startswith("<"):
        return f"#include {header}"
    return f"#include <{header}>"


def generate_header(plan: Plan) -> str:
    """
    Generate C header text for a plan.

    Args:
        plan: Plan to render

    Returns:
        Header text, ending with a newline

    Raises:
        PlanError: include guard is not a valid macro name, or an
            include is not a header name
        GenerationError: a declaration failed to render
    """
    guard = plan.include_guard
    if guard is not None and not (isinstance(guard, str) and _MACRO_RE.match(guard)):
        raise PlanError("generate_header", "an include guard macro name", guard)
    for header in plan.includes:
        if not isinstance(header, str) or not header.strip():
            raise PlanError("generate_header", "a header name", header)

    # Render first so a failing declaration produces no output at all
    declarations = render_declarations(plan)

    lines: List[str] = []

    # Header
    lines.append(f"/* generated by cdeclgen: {_escape_comment(plan.name)} */")
    if guard:
        lines.append(f"#ifndef {guard}")
        lines.append(f"#define {guard}")
    lines.append("")

    if plan.includes:
        for header in plan.includes:
            lines.append(_include_line(header))
        lines.append("")

    # Declarations
    for declaration, text in zip(plan.declarations, declarations):
        if declaration.comment:
            lines.append(f"/* {_escape_comment(declaration.comment)} */")
        lines.append(text)
        lines.append("")

    # Footer
    if guard:
        lines.append(f"#endif /* {guard} */")
    else:
        while lines and lines[-1] == "":
            lines.pop()

    return "\n".join(lines) + "\n"


def save_header_file(plan: Plan, filename: str) -> None:
    """
    Generate the header and save it to a file.

    Args:
        plan: Plan to render
        filename: Output file path (.h extension recommended)
    """
    header = generate_header(plan)
    with open(filename, "w") as f:
        f.write(header)
    logger.info("wrote %s (%d declaration(s))", filename, len(plan.declarations))


__all__ = ["generate_header", "save_header_file"]

"""
Generation-time error taxonomy.

Every error here is raised while a fragment is being generated, before
any output is returned. There is no runtime error path: the generated C
text either exists in full or not at all.

Each error records:
    operation: Name of the operation that rejected its input
    expected:  The shape or arity the operation wanted
    given:     What it actually received
"""

from typing import Any, Optional


class GenerationError(Exception):
    """
    Base class for all cdeclgen errors.

    Callers that only care about "generation failed" catch this.
    Recovery is always the same: correct the input and call again.
    """

    def __init__(self, operation: str, expected: str, given: Any = None, message: Optional[str] = None):
        self.operation = operation
        self.expected = expected
        self.given = given
        super().__init__(message or f"{operation}: expected {expected}, given {given!r}")


class ArityError(GenerationError):
    """Wrong number or kind of arguments (including a missing dispatch handler)."""
    pass


class TypeMismatchError(GenerationError):
    """An argument is not the expected Sequence or count shape."""
    pass


class MalformedSequenceError(GenerationError):
    """A Cons node whose tail is not a Sequence."""
    pass


class NullPointerError(TypeMismatchError):
    """The non-null guard's initializer produced None."""
    pass


class PlanError(GenerationError):
    """A declaration plan document is malformed."""
    pass


class GuardReuseError(RuntimeError):
    """A ChainGuard was entered a second time."""
    pass

"""
Operation registry: every generator, by name, with its arity.

    call("struct", "Point", call("indexedFields", seq_list("int", "int")))
    -> struct Point{int _0; int _1;}

Calling by name is how declaration plans reach the generators. Argument
counts are checked here so a wrong call fails with an ArityError that
names the operation, instead of a bare TypeError.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional

from . import chaining, declarations, indexed
from .errors import ArityError
from .logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Operation:
    """
    A named generator.

    Properties:
        name: Public operation name (camelCase, as used in plan files)
        arity: Required argument count; None means one or more
        function: The generator itself
    """

    name: str
    arity: Optional[int]
    function: Callable[..., Any]

    def check_arity(self, args: tuple) -> None:
        if self.arity is None:
            if not args:
                raise ArityError(self.name, "at least 1 argument", len(args))
        elif len(args) != self.arity:
            raise ArityError(self.name, f"{self.arity} argument(s)", len(args))


_OPERATIONS = [
    Operation("braced", 1, declarations.braced),
    Operation("typedef", 2, declarations.typedef),
    Operation("struct", 2, declarations.struct),
    Operation("anonStruct", 1, declarations.anon_struct),
    Operation("union", 2, declarations.union),
    Operation("anonUnion", 1, declarations.anon_union),
    Operation("enum", 2, declarations.enum),
    Operation("anonEnum", 1, declarations.anon_enum),
    Operation("indexedParams", 1, indexed.indexed_params),
    Operation("indexedFields", 1, indexed.indexed_fields),
    Operation("indexedInitializerList", 1, indexed.indexed_initializer_list),
    Operation("indexedArgs", 1, indexed.indexed_args),
    Operation("introduceVarToStmt", None, chaining.introduce_var_to_stmt),
    Operation("introduceNonNullPtrToStmt", 3, chaining.introduce_non_null_ptr_to_stmt),
    Operation("chainExprStmt", 1, chaining.chain_expr_stmt),
]

OPERATIONS: Mapping[str, Operation] = MappingProxyType({op.name: op for op in _OPERATIONS})


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except (KeyError, TypeError):
        raise ArityError("call", f"one of {', '.join(OPERATIONS)}", name) from None


def operation_names() -> List[str]:
    return list(OPERATIONS)


def arity_of(name: str) -> Optional[int]:
    return get_operation(name).arity


def call(name: str, *args: Any) -> Any:
    """
    Invoke the operation called name.

    Raises:
        ArityError: unknown name, or wrong argument count
        GenerationError: whatever the operation itself rejects
    """
    operation = get_operation(name)
    operation.check_arity(args)
    logger.debug("call %s/%d", name, len(args))
    return operation.function(*args)

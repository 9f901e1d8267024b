"""
Chain guards: the statement chaining protocol for Python callers.

Each guard is a context manager governing exactly one block:

    with introduce_vars(x=5.0, y=lambda: compute()) as v:
        use(v.x, v.y)                # bindings visible here only

    with introduce_non_null(lambda: lookup(key)) as ptr:
        use(ptr)                     # lookup() ran once, ptr is not None

    with chain_expr(log_start):
        work()                       # log_start() ran once, before work()

Stack several with chain_guards(); they are entered in source order
and torn down innermost first.

A guard carries one execution flag. It runs its payload once on entry,
releases on every exit path (exceptions, return, break) and refuses to
be entered again.
"""

from contextlib import ExitStack, contextmanager
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .errors import ArityError, GuardReuseError, NullPointerError, TypeMismatchError
from .logging_utils import get_logger

logger = get_logger(__name__)


def _evaluate(init: Any) -> Any:
    return init() if callable(init) else init


class Bindings:
    """
    Variables introduced by introduce_vars().

    Attributes exist only while the governing block runs.
    """

    def __init__(self, values: Dict[str, Any]):
        self.__dict__.update(values)

    def _clear(self) -> None:
        self.__dict__.clear()

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"Bindings({fields})"


class ChainGuard:
    """
    Base class for all chain guards.

    Subclasses implement _acquire() (runs the payload, returns the with
    target) and may override _release().

    Properties:
        flag_name: Name of the guard's bookkeeping flag. Every guard of
            a kind uses the same name, so nested guards shadow it. That
            shadowing is accepted explicitly and logged, never checked.
        done: True once the guard has run
    """

    flag_name = "chain_guard_break"

    def __init__(self) -> None:
        self.done = False
        self._active = False

    def __enter__(self) -> Any:
        if self.done or self._active:
            raise GuardReuseError(f"{type(self).__name__} governs exactly one block and was already entered")
        logger.debug("%s: entering, shadowing of '%s' accepted", type(self).__name__, self.flag_name)
        self._active = True
        try:
            return self._acquire()
        except BaseException:
            self._active = False
            self.done = True
            raise

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            self._release()
        finally:
            self._active = False
            self.done = True
            logger.debug("%s: released", type(self).__name__)

    def _acquire(self) -> Any:
        raise NotImplementedError

    def _release(self) -> None:
        pass


class IntroduceVars(ChainGuard):
    """Bind caller-declared variables for exactly one block."""

    flag_name = "ml99_priv_break"

    def __init__(self, **initializers: Any):
        super().__init__()
        if not initializers:
            raise ArityError("introduceVars", "at least one variable", {})
        self._initializers = initializers
        self._bindings: Optional[Bindings] = None

    def _acquire(self) -> Bindings:
        values = {name: _evaluate(init) for name, init in self._initializers.items()}
        self._bindings = Bindings(values)
        return self._bindings

    def _release(self) -> None:
        if self._bindings is not None:
            self._bindings._clear()
            self._bindings = None


class IntroduceNonNull(ChainGuard):
    """Bind one value that must not be None; init is evaluated once."""

    flag_name = "ptr"

    def __init__(self, init: Any):
        super().__init__()
        self._init = init
        self.value: Any = None

    def _acquire(self) -> Any:
        value = _evaluate(self._init)
        if value is None:
            raise NullPointerError("introduceNonNull", "a non-None initial value", None)
        self.value = value
        return value

    def _release(self) -> None:
        self.value = None


class ChainExpr(ChainGuard):
    """Call fn once, for its side effect, before the block. Binds nothing."""

    flag_name = "ml99_priv_expr_stmt_break"

    def __init__(self, fn: Callable[..., Any], *args: Any, **kwargs: Any):
        super().__init__()
        if not callable(fn):
            raise TypeMismatchError("chainExpr", "a callable", fn)
        self._call: Tuple[Callable[..., Any], tuple, dict] = (fn, args, kwargs)

    def _acquire(self) -> None:
        fn, args, kwargs = self._call
        fn(*args, **kwargs)
        return None


def introduce_vars(**initializers: Any) -> IntroduceVars:
    return IntroduceVars(**initializers)


def introduce_non_null(init: Any) -> IntroduceNonNull:
    return IntroduceNonNull(init)


def chain_expr(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> ChainExpr:
    return ChainExpr(fn, *args, **kwargs)


@contextmanager
def chain_guards(*guards: ChainGuard) -> Iterator[Tuple[Any, ...]]:
    """
    Stack guards as if each were nested in the previous one.

    Yields the tuple of the guards' with targets, in order. Teardown is
    innermost first; a guard that fails to enter releases the ones
    already entered.
    """
    with ExitStack() as stack:
        targets = tuple(stack.enter_context(guard) for guard in guards)
        yield targets

"""Runtime invariant checks."""

import logging
from collections.abc import Callable

from .exceptions import AssertionFailedError
from .models import DebugSettings

logger = logging.getLogger(__name__)

# Process-wide settings used by the module-level check()
debug_settings = DebugSettings()


class Invariant:
    """Checks runtime invariants, optionally breaking into the debugger.

    Args:
        settings: Debug settings to consult on failure (default: a fresh,
            disabled DebugSettings)
        trap: Callable invoked to break into the debugger (default: the
            builtin ``breakpoint``, which honours ``sys.breakpointhook``)
    """

    def __init__(self, settings: DebugSettings | None = None, trap: Callable[[], object] = breakpoint):
        self.settings = settings if settings is not None else DebugSettings()
        self.trap = trap

    def check(self, condition: object, message: str | None = None) -> None:
        """Raise unless condition is truthy.

        Args:
            condition: Value that must be truthy
            message: Error message (default: "Assertion failed!")

        Raises:
            AssertionFailedError: If condition is falsy
        """
        if condition:
            return

        if self.settings.use_debugger:
            logger.debug(f"Invariant failed, entering debugger: {message or 'Assertion failed!'}")
            self.trap()

        raise AssertionFailedError(message)


def check(condition: object, message: str | None = None) -> None:
    """Raise unless condition is truthy, consulting the process-wide debug_settings.

    See Invariant.check.
    """
    Invariant(debug_settings).check(condition, message)

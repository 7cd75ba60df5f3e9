"""wamp-util: Stateless helpers for a WAMP client library.

This library provides four independent helpers:
- Normally distributed random samples (jittered retry delays and the like)
- Runtime invariant checks with an optional debugger break
- Layered defaults merging for option mappings
- Error dispatch to a caller-supplied handler or a fallback logger

Public API:
    rand_normal: Draw one sample from N(mean, sd**2)
    Invariant, check: Invariant checks; check uses the process-wide debug_settings
    DebugSettings, debug_settings: Debugger-break toggle
    defaults: Fill missing keys from sources, first write wins
    handle_error: Call a handler or log the error
    WampUtilError, AssertionFailedError, InvalidArgumentError: Exception types

Example:
    ```python
    from wamp_util import defaults, handle_error

    # Explicit options win over application defaults, which win over
    # library defaults. Nested option groups are completed too.
    options = defaults(
        {"transport": {"url": "ws://localhost:8080/ws"}},
        {"transport": {"max_retries": 5}},
        {"transport": {"max_retries": 15, "initial_retry_delay": 1.5}, "realm": "realm1"},
        recursive=True,
    )

    # Route failures to the application's callback, if it installed one
    handle_error(options.get("on_user_error"), ValueError("bad payload"), "while processing event")
    ```
"""

from .checks import Invariant
from .checks import check
from .checks import debug_settings
from .exceptions import AssertionFailedError
from .exceptions import InvalidArgumentError
from .exceptions import WampUtilError
from .handlers import handle_error
from .models import DebugSettings
from .sampling import rand_normal
from .utils import defaults

__version__ = "0.1.0"

__all__ = [
    "rand_normal",
    "Invariant",
    "check",
    "debug_settings",
    "DebugSettings",
    "defaults",
    "handle_error",
    "WampUtilError",
    "AssertionFailedError",
    "InvalidArgumentError",
]

"""Data models for wamp-util."""

from dataclasses import dataclass


@dataclass
class DebugSettings:
    """Debugging switches shared by invariant checks.

    Instances are mutable. Flipping a field takes effect for every check that
    holds a reference to the same instance.

    Attributes:
        use_debugger: Break into the debugger before a failed check raises
            (default: False)
    """

    use_debugger: bool = False

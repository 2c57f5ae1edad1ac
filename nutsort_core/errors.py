from __future__ import annotations


class NutSortError(Exception):
    """Base class for every error raised by the puzzle engine."""


class ConfigError(NutSortError, ValueError):
    """Board configuration cannot produce a valid deal."""


class BoltFullError(NutSortError, ValueError):
    """A nut was pushed onto a bolt that has no spare capacity."""


class InvalidBoltError(NutSortError, IndexError):
    """A host addressed a bolt index outside the board."""


class ConsistencyError(NutSortError, RuntimeError):
    """Cloning or restoring broke the capacity or colour-conservation invariant."""


class SolveCancelled(NutSortError):
    """Raised when the host's should_stop hook asks a running search to stop."""

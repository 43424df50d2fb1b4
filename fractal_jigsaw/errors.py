"""Exceptions raised by the jigsaw generator."""


class JigsawError(Exception):
    """Base class for all generator errors."""


class InvalidDimensions(JigsawError, ValueError):
    """Grid dimensions are not integers of at least 2."""


class InvalidPieceBounds(JigsawError, ValueError):
    """Minimum/maximum piece lengths are non-positive or out of order."""


class EmptyGridSelection(JigsawError, RuntimeError):
    """A random empty tile was requested from a fully visited grid.

    This is a driver bug (growth called after full coverage), never a
    recoverable condition.
    """

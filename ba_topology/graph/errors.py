"""Exceptions raised by topology generation."""


class GraphGenerationError(Exception):
    """Raised when a topology cannot be generated.

    No partial graph is returned alongside this error.
    """


class InterconnectionError(GraphGenerationError):
    """Raised when a joining node runs out of valid attachment targets."""

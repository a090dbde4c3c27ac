"""Exceptions raised by the scoring engine."""


class ScoringError(Exception):
    """Base class for scoring engine errors."""


class ValidationError(ScoringError, ValueError):
    """Resume text failed the minimum content checks.

    Raised before any component scorer runs; ``errors`` holds every failed check.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(f"Invalid resume text: {', '.join(self.errors)}")


class InternalInconsistencyError(ScoringError, RuntimeError):
    """A computed aggregate broke an engine invariant (programming bug)."""

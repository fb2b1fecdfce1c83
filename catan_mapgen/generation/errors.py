from __future__ import annotations


class GenerationError(RuntimeError):
    """Raised when no board satisfying the number rules could be produced."""


class HotNumberPlacementError(GenerationError):
    """Raised when a 6 or an 8 has no legal slot left."""


class RepairExhaustedError(GenerationError):
    """Raised when the repair engine runs out of restarts."""


class BoardValidationError(GenerationError):
    """Raised when a finished board fails its final check.

    This signals a bug in the generator, not an unlucky draw.
    """

"""Exception hierarchy for neurostate.

All exceptions derive from NeuroStateError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class NeuroStateError(Exception):
    """Base exception for all neurostate errors."""


class ConfigValidationError(NeuroStateError):
    """Configuration field validation failed.

    Raised when a seed is not a valid 32-bit unsigned integer, a trial count
    is negative, an override names an unknown field, or a value fails type
    validation. Always fatal at construction time.
    """


class SequenceGenerationError(NeuroStateError):
    """A sequence request could not be honoured.

    Raised for an unknown condition tag or an inconsistent tutorial phase
    (a phase given for a main block, or missing for a tutorial block).
    """


class SessionStateError(NeuroStateError):
    """An experiment session was driven out of order.

    Raised when a response arrives before a trial has begun, or when a
    finished session is asked for another trial.
    """


class ExportError(NeuroStateError):
    """Experiment data could not be exported.

    Raised when an experiment document is missing ``participantID``,
    ``condition`` or ``trials``, or when a trial row is not a mapping.
    """

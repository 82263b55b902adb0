"""Trial logging subsystem for neurostate.

Provides immutable per-trial records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from neurostate.logging.logger import TrialLogger
from neurostate.logging.types import TrialRecord

__all__ = [
    "TrialLogger",
    "TrialRecord",
]

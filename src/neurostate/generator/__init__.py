"""Stimulus generation engine for neurostate.

Builds reproducible HI/HD trial sequences (tutorial phases and main block)
from one seeded random stream.
"""

from neurostate.generator.assembler import (
    StimulusGenerator,
    create_generator,
    export_sequences,
    import_sequences,
)
from neurostate.generator.sequence import SequenceGenerator
from neurostate.generator.types import (
    CONDITIONS,
    ConditionSequences,
    SessionSequences,
    Trial,
    TrialSequence,
)

__all__ = [
    "CONDITIONS",
    "ConditionSequences",
    "SequenceGenerator",
    "SessionSequences",
    "StimulusGenerator",
    "Trial",
    "TrialSequence",
    "create_generator",
    "export_sequences",
    "import_sequences",
]

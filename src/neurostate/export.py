"""JSON and CSV export of experiment data.

The JSON document is ``{participantID, condition, trials: [...]}``; the CSV
flattens it with ``participantID`` and ``condition`` prepended to every row.
CSV cells follow the front end's conventions: booleans as ``1``/``0``,
``None`` as an empty cell, integral floats without a trailing ``.0`` and
strings containing commas quoted.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from neurostate.exceptions import ExportError
from neurostate.logging.types import TrialRecord

logger = logging.getLogger("neurostate")

_DOCUMENT_KEYS = ("participantID", "condition", "trials")


@dataclass
class ExperimentData:
    """Everything a session logs for one participant.

    Attributes:
        participant_id: Participant identifier.
        condition: Condition the participant was assigned to.
        trials: Answered trials, in order.
    """

    participant_id: str
    condition: str
    trials: list[TrialRecord] = field(default_factory=list)

    def to_document(self) -> dict[str, Any]:
        """Return the JSON document form."""
        return {
            "participantID": self.participant_id,
            "condition": self.condition,
            "trials": [asdict(trial) for trial in self.trials],
        }


def export_stem(participant_id: str, condition: str) -> str:
    """File name without extension, e.g. ``neurostate_P01234_HI``."""
    return f"neurostate_{participant_id}_{condition}"


def dumps_json(data: ExperimentData, indent: int | None = 2) -> str:
    """Serialize *data* as the JSON document."""
    return json.dumps(data.to_document(), indent=indent)


def _csv_cell(value: Any) -> Any:
    if isinstance(value, bool):
        return "1" if value else "0"
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return value


def json_to_csv(document: Mapping[str, Any]) -> str:
    """Flatten an experiment document into CSV text.

    Column order is ``participantID, condition`` followed by the keys of the
    first trial. Rows are separated by ``\\n`` with no trailing newline.

    Args:
        document: Mapping with ``participantID``, ``condition`` and ``trials``.

    Returns:
        CSV text, or ``""`` when there are no trials.

    Raises:
        ExportError: If a required key is missing or a trial is not a mapping.
    """
    missing = [key for key in _DOCUMENT_KEYS if key not in document]
    if missing:
        raise ExportError(f"Experiment document is missing {', '.join(missing)}")

    trials = document["trials"]
    if not trials:
        return ""
    if not all(isinstance(trial, Mapping) for trial in trials):
        raise ExportError("Every trial in an experiment document must be a mapping")

    headers = list(trials[0].keys())
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["participantID", "condition", *headers])
    for trial in trials:
        writer.writerow(
            [
                _csv_cell(document["participantID"]),
                _csv_cell(document["condition"]),
                *(_csv_cell(trial.get(header)) for header in headers),
            ]
        )
    return buffer.getvalue().removesuffix("\n")


def dumps_csv(data: ExperimentData) -> str:
    """Serialize *data* as CSV text."""
    return json_to_csv(data.to_document())


def write_json(data: ExperimentData, directory: str | Path) -> Path:
    """Write ``<stem>.json`` into *directory* (created if needed).

    Returns:
        Path of the written file.
    """
    path = Path(directory) / f"{export_stem(data.participant_id, data.condition)}.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_json(data), encoding="utf-8")
    logger.info("Wrote %d trials to %s", len(data.trials), path)
    return path


def write_csv(data: ExperimentData, directory: str | Path) -> Path:
    """Write ``<stem>.csv`` into *directory* (created if needed).

    Returns:
        Path of the written file.
    """
    path = Path(directory) / f"{export_stem(data.participant_id, data.condition)}.csv"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_csv(data), encoding="utf-8")
    logger.info("Wrote %d trials to %s", len(data.trials), path)
    return path

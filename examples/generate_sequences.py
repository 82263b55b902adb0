#!/usr/bin/env python3
"""Generate a full stimulus session and write it to JSON.

Sequences are reproducible from the seed, so one file can be shared by
every participant of a study. Coverage of each condition's main block is
logged after generation.

Usage:
    # Default seed (12345) and 1000 main trials per condition:
    python generate_sequences.py

    # Short version for piloting:
    python generate_sequences.py --trials 200 --output pilot.json

Environment variables (NS_*) configure everything else, e.g.:
    export NS_EXPLORATION_ENABLED=false
    export NS_STREAM_TYPE=numpy
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from neurostate.exceptions import NeuroStateError
from neurostate.generator import create_generator, export_sequences

logger = logging.getLogger("neurostate.generate")


def generate(seed: int, trials: int, output: Path) -> None:
    """Generate all sequences, log coverage and write the JSON export."""
    generator = create_generator(seed=seed, main_trial_count=trials)
    sequences = generator.generate_all_sequences()
    generator.analyze_state_coverage(sequences)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(export_sequences(sequences), encoding="utf-8")
    logger.info("Wrote session (seed=%d, main_trials=%d) to %s", seed, trials, output)


def main() -> None:
    """Parse arguments and generate the session."""
    parser = argparse.ArgumentParser(
        description="Generate reproducible HI/HD stimulus sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s                               # seed 12345, 1000 main trials
  %(prog)s --seed 7 --trials 200         # short version
  %(prog)s --output out/session.json     # custom output path
""",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=12345,
        help="Seed of the stimulus stream (default: 12345).",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=1000,
        help="Main trials per condition (default: 1000).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("sequences.json"),
        help="Output file (default: sequences.json).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        generate(args.seed, args.trials, args.output)
    except NeuroStateError as exc:
        logger.error("Generation failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Configuration system for neurostate.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (NS_*) -> .env file -> field defaults.

Session-level overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

import numbers
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from neurostate.exceptions import ConfigValidationError
from neurostate.rng.base import validate_seed

# Seeds feed a 32-bit linear congruential recurrence.
_SEED_LIMIT = 2**32

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class NeuroStateConfig(BaseSettings):
    """Configuration for neurostate.

    Resolution order: init kwargs -> env vars (NS_*) -> .env file -> defaults.

    Fields are grouped by the subsystem that reads them:
    - **Generation**: seed, trial counts, sampling widths.
    - **Hazard**: per-condition change probabilities.
    - **Exploration**: the coverage policy applied on change-points.
    - **Scoring**, **Logging** and **Session** settings for the driver.
    """

    model_config = SettingsConfigDict(
        env_prefix="NS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Generation ---

    seed: int = Field(
        default=12345,
        ge=0,
        lt=_SEED_LIMIT,
        description="Seed of the stimulus random stream (unsigned 32-bit)",
    )
    main_trial_count: int = Field(
        default=1000,
        ge=0,
        description="Trials in each condition's main sequence",
    )
    stream_type: str = Field(
        default="lcg",
        description="Random stream identifier: 'lcg' or 'numpy'",
    )
    likelihood_half_width: float = Field(
        default=20.0,
        ge=0.0,
        description="Half-width of the triangular observation likelihood",
    )
    change_size_half_width: float = Field(
        default=40.0,
        ge=0.0,
        description="Half-width of each bimodal transition lobe",
    )
    change_separation: float = Field(
        default=15.0,
        ge=0.0,
        description="Distance from the current state to each transition lobe centre",
    )
    large_jump_probability: float = Field(
        default=0.2,
        ge=0.0,
        le=1.0,
        description="Probability that a transition is a wide jump around mid-range",
    )
    tutorial_trial_counts: list[int] = Field(
        default_factory=lambda: [10, 10, 15, 15, 20],
        description="Trial count per tutorial phase (phase 1 first)",
    )
    narrow_likelihood_phases: list[int] = Field(
        default_factory=lambda: [3, 4],
        description="Tutorial phases that use a narrowed observation likelihood",
    )
    narrow_likelihood_factor: float = Field(
        default=0.5,
        gt=0.0,
        description="Multiplier applied to the likelihood half-width in narrow phases",
    )

    # --- Hazard ---

    hi_hazard_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Constant change probability for the HI condition",
    )
    hd_hazard_midpoint: float = Field(
        default=10.0,
        description="Tau at which the HD logistic hazard equals 0.5",
    )
    hd_hazard_slope: float = Field(
        default=1.0,
        gt=0.0,
        description="Slope of the HD logistic hazard",
    )

    # --- Exploration ---

    exploration_enabled: bool = Field(
        default=True,
        description="Allow targeted exploration moves on eligible change-points",
    )
    exploration_probability: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Probability that an eligible change-point explores",
    )
    exploration_interval: int = Field(
        default=50,
        gt=0,
        description="Main-sequence trials between exploration-eligible trials",
    )

    # --- Scoring ---

    scoring_rule: str = Field(
        default="tiered",
        description="Scoring rule: 'tiered' or 'linear'",
    )
    score_radius: float = Field(
        default=10.0,
        gt=0.0,
        description="Distance within which the tiered rule awards full credit",
    )
    full_credit: float = Field(
        default=1.0,
        description="Points for an estimate within score_radius",
    )
    partial_credit: float = Field(
        default=0.25,
        description="Points for an estimate within twice score_radius",
    )
    linear_max_points: float = Field(
        default=100.0,
        description="Points for a perfect estimate under the linear rule",
    )
    linear_points_per_unit: float = Field(
        default=2.0,
        gt=0.0,
        description="Points the linear rule deducts per state unit of error",
    )

    # --- Logging ---

    log_level: str = Field(
        default="summary",
        description="Trial logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all trial records in the logger for analysis",
    )

    # --- Session ---

    show_past_dots: bool = Field(
        default=False,
        description="Between-subjects display flag recorded with every trial",
    )

    @field_validator("seed", mode="before")
    @classmethod
    def _integer_seed(cls, value: Any) -> Any:
        # NS_SEED arrives as a string; every other source must supply an integer.
        # Lax mode would otherwise accept booleans and integral floats.
        if isinstance(value, str):
            if not value.strip().isdigit():
                raise ValueError(f"seed must be a decimal integer, got {value!r}")
            return int(value)
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"seed must be an integer, got {value!r}")
        return int(value)

    @field_validator("tutorial_trial_counts")
    @classmethod
    def _non_negative_counts(cls, value: list[int]) -> list[int]:
        for count in value:
            if count < 0:
                raise ValueError(f"tutorial trial counts must be >= 0, got {count}")
        return value


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(NeuroStateConfig.model_fields.keys())


def load_config(**kwargs: Any) -> NeuroStateConfig:
    """Build a config, converting pydantic failures to ConfigValidationError.

    Args:
        **kwargs: Field values passed straight to :class:`NeuroStateConfig`.

    Returns:
        A validated configuration.

    Raises:
        ConfigValidationError: If any field fails validation.
    """
    # Only NS_SEED is parsed from text; programmatic seeds must be integers.
    if "seed" in kwargs:
        validate_seed(kwargs["seed"])
    try:
        return NeuroStateConfig(**kwargs)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Mapping of field name to value.

    Raises:
        ConfigValidationError: If any key is not a config field.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")


def resolve_config(
    defaults: NeuroStateConfig,
    overrides: dict[str, Any] | None,
) -> NeuroStateConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field values to replace, keyed by field name.

    Returns:
        A new NeuroStateConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)
    if "seed" in overrides:
        validate_seed(overrides["seed"])

    # model_copy(update=...) skips validation, so a negative trial count
    # would slip through. model_validate runs the full validator.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return NeuroStateConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc

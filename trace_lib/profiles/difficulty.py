"""Difficulty tiers and the validation configuration they produce.

A DifficultyProfile is a pure parameter row: how wide the corridor is, how
long checkpoints and gaps are (both as fractions of row height), how much
coverage and stray ink are tolerated, and how feedback is paced. The
concrete ValidationConfiguration is recomputed whenever the row's physical
size or the tier changes.

Example usage::

    from trace_lib.profiles import Difficulty

    profile = Difficulty.BEGINNER.profile
    configuration = profile.validation_configuration(
        row_height=120, visual_start_radius=12, ink_width=6)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..settings import MINIMUM_CORRIDOR_RADIUS


class HapticStyle(Enum):
    """Feedback intensity used for warnings."""
    NONE = 'none'
    SOFT = 'soft'
    WARNING = 'warning'


@dataclass(frozen=True)
class ValidationConfiguration:
    """Concrete tolerances for one row layout.

    Attributes:
        corridor_radius: Max distance from a path for a sample to count.
        checkpoint_length: Physical length of each checkpoint span.
        spacing_length: Physical length of each gap between checkpoints.
        coverage_threshold: Minimum coverage ratio for the summary pass.
        outside_allowance: Maximum share of samples outside all corridors.
        ink_width: The caller's current ink stroke width.
    """
    corridor_radius: float
    checkpoint_length: float
    spacing_length: float
    coverage_threshold: float
    outside_allowance: float
    ink_width: float


@dataclass(frozen=True)
class DifficultyProfile:
    """Parameter row for one difficulty tier.

    Attributes:
        corridor_fraction: Corridor radius as a fraction of row height.
        checkpoint_fraction: Checkpoint length as a fraction of row height.
        spacing_fraction: Gap length as a fraction of row height.
        coverage_threshold: Minimum coverage ratio (0.0 to 1.0).
        outside_allowance: Maximum outside-ink ratio (0.0 to 1.0).
        warning_cooldown: Seconds between consecutive warnings.
        haptic_style: Feedback intensity for warnings.
    """
    corridor_fraction: float
    checkpoint_fraction: float
    spacing_fraction: float
    coverage_threshold: float
    outside_allowance: float
    warning_cooldown: float
    haptic_style: HapticStyle

    def validation_configuration(self, row_height: float, visual_start_radius: float,
                                 ink_width: float) -> ValidationConfiguration:
        """Derive concrete tolerances for a row of the given size.

        The corridor is never narrower than the visual start dot or
        MINIMUM_CORRIDOR_RADIUS.
        """
        corridor = max(row_height * self.corridor_fraction,
                       visual_start_radius,
                       MINIMUM_CORRIDOR_RADIUS)
        return ValidationConfiguration(
            corridor_radius=corridor,
            checkpoint_length=row_height * self.checkpoint_fraction,
            spacing_length=row_height * self.spacing_fraction,
            coverage_threshold=self.coverage_threshold,
            outside_allowance=self.outside_allowance,
            ink_width=ink_width,
        )


class Difficulty(Enum):
    """Named skill tiers."""
    BEGINNER = 'beginner'
    INTERMEDIATE = 'intermediate'
    EXPERT = 'expert'

    @property
    def profile(self) -> DifficultyProfile:
        return PROFILES[self]

    @classmethod
    def from_name(cls, name: str) -> Difficulty:
        """Look up a tier by name, case-insensitively.

        Raises:
            ValueError: If ``name`` is not a known tier.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ', '.join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {name!r}; expected one of: {valid}") from None


PROFILES = {
    Difficulty.BEGINNER: DifficultyProfile(
        corridor_fraction=0.12,
        checkpoint_fraction=0.05,
        spacing_fraction=0.05,
        coverage_threshold=0.65,
        outside_allowance=0.35,
        warning_cooldown=2.2,
        haptic_style=HapticStyle.NONE,
    ),
    Difficulty.INTERMEDIATE: DifficultyProfile(
        corridor_fraction=0.085,
        checkpoint_fraction=0.06,
        spacing_fraction=0.04,
        coverage_threshold=0.75,
        outside_allowance=0.25,
        warning_cooldown=1.6,
        haptic_style=HapticStyle.SOFT,
    ),
    Difficulty.EXPERT: DifficultyProfile(
        corridor_fraction=0.05,
        checkpoint_fraction=0.07,
        spacing_fraction=0.03,
        coverage_threshold=0.85,
        outside_allowance=0.15,
        warning_cooldown=1.0,
        haptic_style=HapticStyle.WARNING,
    ),
}

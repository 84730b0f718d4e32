"""Difficulty tiers and validation configuration."""

from .difficulty import (
    PROFILES,
    Difficulty,
    DifficultyProfile,
    HapticStyle,
    ValidationConfiguration,
)

__all__ = [
    'Difficulty', 'DifficultyProfile', 'HapticStyle',
    'ValidationConfiguration', 'PROFILES',
]

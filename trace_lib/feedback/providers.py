"""Injected feedback capability.

Tracing feedback (a buzz on a mistake, a pulse on success) is passed into
the session as a provider instead of being reached through a process-wide
singleton. Providers translate requests into FeedbackEvent values and hand
them to a sink callable owned by the UI or device layer.

The module provides the following classes:
    FeedbackEvent: A single feedback request.
    FeedbackProvider: Protocol every provider satisfies.
    NoOpFeedback: Swallows everything (beginner tier, tests).
    SoftFeedback: Downgrades warnings to a gentle notice.
    WarningFeedback: Emits full warnings.

Example usage::

    from trace_lib.feedback import provider_for_style

    events = []
    feedback = provider_for_style(profile.haptic_style, events.append)
    feedback.warning()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from ..profiles.difficulty import HapticStyle


@dataclass(frozen=True)
class FeedbackEvent:
    """A feedback request.

    Attributes:
        kind: 'warning', 'success' or 'notice'.
        intensity: Strength from 0.0 to 1.0.
    """
    kind: str
    intensity: float = 1.0


FeedbackSink = Callable[[FeedbackEvent], None]


class FeedbackProvider(Protocol):
    """Interface the session uses to request feedback."""

    def warning(self) -> None:
        ...

    def success(self) -> None:
        ...

    def notice(self, intensity: float = 0.75) -> None:
        ...


class NoOpFeedback:
    """Provider that ignores every request."""

    def warning(self) -> None:
        pass

    def success(self) -> None:
        pass

    def notice(self, intensity: float = 0.75) -> None:
        pass


class WarningFeedback:
    """Provider that forwards requests unchanged to ``sink``."""

    def __init__(self, sink: FeedbackSink):
        self._sink = sink

    def warning(self) -> None:
        self._sink(FeedbackEvent('warning'))

    def success(self) -> None:
        self._sink(FeedbackEvent('success'))

    def notice(self, intensity: float = 0.75) -> None:
        self._sink(FeedbackEvent('notice', max(0.0, min(1.0, intensity))))


class SoftFeedback(WarningFeedback):
    """Provider that turns warnings into a low-intensity notice."""

    SOFT_INTENSITY = 0.4

    def warning(self) -> None:
        self.notice(self.SOFT_INTENSITY)


def provider_for_style(style: HapticStyle, sink: FeedbackSink | None) -> FeedbackProvider:
    """Pick the provider matching a profile's haptic style.

    A missing sink always yields NoOpFeedback.
    """
    if sink is None or style is HapticStyle.NONE:
        return NoOpFeedback()
    if style is HapticStyle.SOFT:
        return SoftFeedback(sink)
    return WarningFeedback(sink)

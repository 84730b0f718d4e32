"""Injected feedback providers (no-op, soft, warning)."""

from .providers import (
    FeedbackEvent,
    FeedbackProvider,
    NoOpFeedback,
    SoftFeedback,
    WarningFeedback,
    provider_for_style,
)

__all__ = [
    'FeedbackEvent', 'FeedbackProvider',
    'NoOpFeedback', 'SoftFeedback', 'WarningFeedback',
    'provider_for_style',
]

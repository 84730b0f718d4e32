"""Row-attempt orchestration around the validator."""

from .trace_session import WARNING_MESSAGES, SessionUpdate, TraceSession

__all__ = ['TraceSession', 'SessionUpdate', 'WARNING_MESSAGES']

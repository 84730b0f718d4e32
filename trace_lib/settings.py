"""Shared numeric settings and logging setup for trace validation.

This module centralizes the constants used by:
    - planning.plan (arc-length walking, checkpoint lookup)
    - validation.tolerances (start/end capture bands)
    - validation.summary (coverage and outside-ink pass)
    - profiles.difficulty (corridor floor)
"""

from __future__ import annotations

import logging
from typing import TextIO

# Lengths at or below this are treated as zero
LENGTH_EPSILON = 1e-9

# Slack when mapping a progress value onto a checkpoint span
CHECKPOINT_LOOKUP_SLACK = 1e-4

# Adaptive start band: max(length * fraction, ink width * multiplier)
START_TOLERANCE_LENGTH_FRACTION = 0.4
START_TOLERANCE_INK_MULTIPLIER = 1.2

# Adaptive end band: max(length * fraction, ink width * multiplier)
END_TOLERANCE_LENGTH_FRACTION = 0.3
END_TOLERANCE_INK_MULTIPLIER = 1.0

# Caps on the bands, as fractions of the checkpoint's progress span
START_CAPTURE_SPAN_CAP = 0.5
END_TOLERANCE_SPAN_CAP = 0.4

# Minimum advance through a checkpoint before it can complete
MINIMUM_ADVANCE_FRACTION = 0.6

# A clipped final checkpoint shorter than this fraction of the checkpoint
# length is merged into the previous checkpoint
MIN_TAIL_CHECKPOINT_FRACTION = 0.5

# Corridor radius floor in absolute units
MINIMUM_CORRIDOR_RADIUS = 3.0

# Summary pass: reference resampling step as a fraction of corridor radius
COVERAGE_STEP_FRACTION = 0.5

# Summary pass: below this many samples the outside ratio is not judged
MIN_SUMMARY_SAMPLES = 8


# Format for handlers installed by configure_logging
LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s] %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger(__name__)

# Handlers owned by configure_logging, replaced on each call
_installed_handlers: list[logging.Handler] = []


def configure_logging(level: str = 'INFO',
                      log_file: str | None = None,
                      stream: TextIO | None = None) -> logging.Logger:
    """Attach trace_lib's own handlers to the ``trace_lib`` package logger.

    Intended for tools and scripts that run the validator standalone. The
    root logger and any handlers the host application installed are left
    alone; calling this again replaces only the handlers from the previous
    call. Records stop propagating to the root logger once configured, so
    they are not printed twice.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
            Unknown names fall back to INFO.
        log_file: Optional path of a log file written alongside the stream.
        stream: Stream for console output. Defaults to stderr.

    Returns:
        The configured ``trace_lib`` logger.

    Example:
        Trace every sample of a session while debugging::

            from trace_lib.settings import configure_logging
            configure_logging(level='DEBUG', log_file='trace_session.log')
    """
    package_logger = logging.getLogger(__name__.partition('.')[0])
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        _installed_handlers.append(handler)
    package_logger.propagate = False

    # Only diagnostic rendering touches Pillow; keep its plugin chatter out
    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stream')
    return package_logger

"""Precondition failures raised by range construction and stepping.

These signal programmer errors. None of them derive from ``ValueError`` or
``AssertionError``, so a failure raised inside a pydantic validator reaches
the caller as-is instead of being folded into a ``ValidationError``.
"""

import logging
from typing import NoReturn

logger = logging.getLogger(__name__)


class PreconditionFailure(Exception):
    """Base class for every precondition violation in rangekit."""


class InvalidRangeError(PreconditionFailure):
    """A range was formed with ``lower_bound > upper_bound``."""


class RangeOverflowError(PreconditionFailure, OverflowError):
    """A bound was stepped outside its type's representable domain."""


class RangeIndexError(PreconditionFailure, IndexError):
    """An index or position fell outside the range it was used with."""


class UnsupportedBoundError(PreconditionFailure, TypeError):
    """A stepping-only operation was used with a non-steppable bound."""


def fail(error_cls: type[PreconditionFailure], message: str) -> NoReturn:
    logger.debug("precondition failed (%s): %s", error_cls.__name__, message)
    raise error_cls(message)


def precondition(
    condition: bool,
    message: str,
    error_cls: type[PreconditionFailure] = PreconditionFailure,
) -> None:
    """Raise ``error_cls`` with ``message`` unless ``condition`` holds."""
    if not condition:
        fail(error_cls, message)

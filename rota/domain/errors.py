"""Exceptions raised when a rota run cannot complete."""

from __future__ import annotations


class RotaError(Exception):
    """Base class for failures that abort a rota run."""


class HolidayFeedError(RotaError):
    """The bank holiday feed was unreachable or returned an unexpected shape."""


class MissingDataError(RotaError):
    """A required data source is absent or has no usable rows."""


class MalformedRecordError(RotaError, ValueError):
    """A preference row is missing a required field."""

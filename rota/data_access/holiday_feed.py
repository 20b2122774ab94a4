"""Bank holiday loading from the GOV.UK JSON feed or a saved copy of it.

Expected payload shape::

    {"england-and-wales": {"division": "...", "events": [{"date": "2026-12-25", ...}, ...]}, ...}

Only the ``date`` of each event in the configured region is used.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Set

import requests

from rota.config import BANK_HOLIDAYS_URL, HOLIDAY_FEED_TIMEOUT, HOLIDAY_REGION
from rota.domain.errors import HolidayFeedError, MissingDataError
from rota.engine.calendar_window import to_date_key


def fetch_bank_holidays(
    url: str = BANK_HOLIDAYS_URL,
    region: str = HOLIDAY_REGION,
    timeout: float | None = HOLIDAY_FEED_TIMEOUT,
    session=None,
) -> Set[date]:
    """Download the holiday feed and return the region's holiday dates.

    Args:
        session: Anything with a ``requests``-style ``get``; defaults to the
            ``requests`` module itself.

    Raises:
        HolidayFeedError: On network errors, non-2xx responses, invalid JSON
            or an unexpected payload shape.
    """
    http = session if session is not None else requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.exceptions.RequestException as exc:
        raise HolidayFeedError(f"Could not fetch bank holidays from {url}: {exc}") from exc
    except ValueError as exc:
        raise HolidayFeedError(f"Bank holiday feed at {url} did not return valid JSON: {exc}") from exc

    return parse_bank_holidays(payload, region)


def load_bank_holidays_file(path: Path, region: str = HOLIDAY_REGION) -> Set[date]:
    """Read a saved copy of the feed from disk."""
    if not path.exists():
        raise MissingDataError(f"Bank holidays file not found: {path}")
    try:
        with path.open(encoding="utf-8") as handle:
            payload = json.load(handle)
    except ValueError as exc:
        raise HolidayFeedError(f"Bank holidays file {path} is not valid JSON: {exc}") from exc
    return parse_bank_holidays(payload, region)


def parse_bank_holidays(payload, region: str = HOLIDAY_REGION) -> Set[date]:
    try:
        events = payload[region]["events"]
    except (KeyError, TypeError):
        raise HolidayFeedError(f"Bank holiday payload has no events for region '{region}'.") from None
    if not isinstance(events, list):
        raise HolidayFeedError(f"Bank holiday events for region '{region}' must be a list.")

    holidays: Set[date] = set()
    for event in events:
        try:
            holidays.add(to_date_key(event["date"]))
        except (KeyError, TypeError, ValueError):
            raise HolidayFeedError(f"Malformed bank holiday event: {event!r}") from None
    return holidays

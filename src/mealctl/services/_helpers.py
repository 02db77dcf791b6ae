"""Shared service-layer helper functions."""

from __future__ import annotations

import shutil
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

WEEK_DAYS = 7


def today() -> date:
    """Today's local calendar date (meal slots follow the household's clock)."""
    return date.today()


def now_compact() -> str:
    """Current UTC time as compact ISO (YYYYMMDDTHHmmss, for backup filenames)."""
    return datetime.now(UTC).strftime("%Y%m%dT%H%M%S")


def parse_day(text: str, *, reference: date | None = None) -> date:
    """Parse ``today``, ``tomorrow``, or ``YYYY-MM-DD`` into a date.

    Raises:
        ValueError: If *text* matches none of the accepted forms.

    Examples:
        >>> parse_day("2024-01-15")
        datetime.date(2024, 1, 15)
        >>> parse_day("tomorrow", reference=date(2024, 1, 31))
        datetime.date(2024, 2, 1)
    """
    base = reference or today()
    keyword = text.strip().lower()
    if keyword == "today":
        return base
    if keyword == "tomorrow":
        return base + timedelta(days=1)
    try:
        return date.fromisoformat(keyword)
    except ValueError:
        msg = f"Invalid date {text!r}: use today, tomorrow, or YYYY-MM-DD"
        raise ValueError(msg) from None


def week_from(start: date) -> tuple[date, date]:
    """Inclusive seven-day window beginning at *start*."""
    return start, start + timedelta(days=WEEK_DAYS - 1)


def backup_file(path: Path, backup_dir: Path) -> Path:
    """Copy *path* into *backup_dir* with a timestamped name."""
    backup_dir.mkdir(parents=True, exist_ok=True)
    target = backup_dir / f"{path.stem}-{now_compact()}{path.suffix}"
    shutil.copy2(path, target)
    return target

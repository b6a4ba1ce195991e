"""Formatting helpers shared by the views and templates."""

from datetime import date, datetime, timezone
from typing import Dict, Optional, Union

from directus_pages.constants import DATE_LOCALE

# Short date patterns, as produced by a browser's toLocaleDateString()
SHORT_DATE_PATTERNS: Dict[str, str] = {
    "en-US": "{month}/{day}/{year}",
    "en-GB": "{day:02d}/{month:02d}/{year}",
    "de-DE": "{day}.{month}.{year}",
    "fr-FR": "{day:02d}/{month:02d}/{year}",
    "nl-NL": "{day}-{month}-{year}",
    "ja-JP": "{year}/{month}/{day}",
    "sv-SE": "{year}-{month:02d}-{day:02d}",
}


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse a Directus timestamp (ISO 8601, optionally with a ``Z`` suffix)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_short_date(
    value: Union[str, datetime, date, None], locale: str = DATE_LOCALE
) -> str:
    """Format a timestamp as a short date for ``locale``.

    Aware datetimes are converted to UTC first so the rendered day does not
    depend on the host timezone. Unknown locales fall back to ``en-US``.
    Missing values render as an empty string.
    """
    if value is None or isinstance(value, (datetime, str)):
        parsed = parse_timestamp(value)
        if parsed is None:
            return ""
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        day = parsed.date()
    else:
        day = value

    pattern = SHORT_DATE_PATTERNS.get(locale, SHORT_DATE_PATTERNS["en-US"])
    return pattern.format(year=day.year, month=day.month, day=day.day)

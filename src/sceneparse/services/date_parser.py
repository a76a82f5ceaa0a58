"""
Date parser module for numeric and month name dates in release names.
"""

import datetime
import re
from typing import Mapping, Optional

from ..core.config import ERROR_MESSAGES
from ..core.exceptions import DateParseError
from ..knowledge import grammar

NUMERIC_DATE = re.compile(r"[._(-]" + grammar.REGEX_DATE + r"[._)-]", re.IGNORECASE)
MUSIC_DATE = re.compile(grammar.REGEX_DATE_MUSIC, re.IGNORECASE)


def expand_year(token: str) -> int:
    """Expand a two digit year the way strptime does (69-99 -> 19xx, else 20xx)."""
    if len(token) == 2:
        return datetime.datetime.strptime(token, "%y").year
    return int(token)


def build_date(day, month, year, release: str) -> datetime.date:
    """
    Build a calendar date.

    Raises:
        DateParseError: If the combination is not a valid date
    """
    try:
        return datetime.date(int(year), int(month), int(day))
    except ValueError as e:
        raise DateParseError(
            ERROR_MESSAGES["INVALID_DATE"].format(date=f"{day}.{month}.{year}", release=release)
        ) from e


def find_numeric_date(release: str) -> Optional[re.Match]:
    """Return the first numeric date token of a release name."""
    return NUMERIC_DATE.search(release)


def parse_numeric_date(match: re.Match, release: str) -> datetime.date:
    """
    Turn a numeric date match into a date.

    Supported orders: 21.09.16 (default), 16.09.2021, 2021.09.16 and
    09.16.2021. When day and month are both <= 12 the order can't be told
    apart, so the date could be wrong.

    Raises:
        DateParseError: If the tokens don't form a valid date
    """
    year, month, day = match.group(1), match.group(2), match.group(3)

    # Older music video releases put the year last
    if MUSIC_DATE.search(release):
        year, day = day, year

    # 4 digit day is the year
    if len(day) == 4:
        year, day = day, year

    # Month > 12 means day and month are swapped
    if int(month) > 12:
        day, month = month, day

    try:
        year = expand_year(year)
    except ValueError as e:
        raise DateParseError(
            ERROR_MESSAGES["INVALID_DATE"].format(date=f"{day}.{month}.{year}", release=release)
        ) from e

    return build_date(day, month, year, release)


def parse_monthname_date(text: str, months: Mapping[int, str], release: str) -> Optional[datetime.date]:
    """
    Find a date written with a month name (Jan.2021, 3rd.March.2020).

    The last match wins, the day defaults to 1.

    Args:
        text: Release name (episode tokens already stripped)
        months: Month number -> month name pattern
        release: Original release name, for error messages

    Returns:
        Parsed date or None if no month name date was found

    Raises:
        DateParseError: If the tokens don't form a valid date
    """
    pattern = grammar.REGEX_DATE_MONTHNAME.replace("%monthname%", "|".join(months.values()))
    matches = list(re.finditer(r"[._-]" + pattern + r"[._-]", text, re.IGNORECASE))
    if not matches:
        return None

    last = matches[-1]
    day = last.group(1) or last.group(3) or last.group(5) or 1
    month_name = last.group(2)
    year = last.group(4)

    month = None
    for number, month_pattern in months.items():
        if re.search(month_pattern, month_name, re.IGNORECASE):
            month = number
            break

    return build_date(day, month, year, release)

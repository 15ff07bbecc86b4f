# src/gedcom_import/dates/normalizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Month and calendar tables
# ---------------------------------------------------------------------------

MONTHS: Dict[str, int] = {
    "JAN": 1, "JANUARY": 1,
    "FEB": 2, "FEBRUARY": 2,
    "MAR": 3, "MARCH": 3,
    "APR": 4, "APRIL": 4,
    "MAY": 5,
    "JUN": 6, "JUNE": 6,
    "JUL": 7, "JULY": 7,
    "AUG": 8, "AUGUST": 8,
    "SEP": 9, "SEPT": 9, "SEPTEMBER": 9,
    "OCT": 10, "OCTOBER": 10,
    "NOV": 11, "NOVEMBER": 11,
    "DEC": 12, "DECEMBER": 12,
}

CALENDAR_ALIASES = {
    "JULIAN": "JULIAN",
    "OLD STYLE": "JULIAN",
    "GREGORIAN": "GREGORIAN",
    "NEW STYLE": "GREGORIAN",
}

# GEDCOM 5.5 calendar escapes, e.g. "@#DJULIAN@ 1 JAN 1700"
CALENDAR_ESCAPES = {
    "@#DGREGORIAN@": "GREGORIAN",
    "@#DJULIAN@": "JULIAN",
    "@#DHEBREW@": "HEBREW",
    "@#DFRENCH R@": "FRENCH_R",
}


# ---------------------------------------------------------------------------
# Qualifiers: alias (lowercase) -> (standard code, kind)
# ---------------------------------------------------------------------------

QUALIFIER_ALIASES: Dict[str, Tuple[str, str]] = {}

_QUALIFIERS: List[Tuple[str, str, List[str]]] = [
    ("ABT", "approximate", ["abt", "abt.", "about", "approx", "approx.", "circa", "c.", "ca", "ca.", "around"]),
    ("BEF", "before", ["bef", "bef.", "before", "prior to"]),
    ("AFT", "after", ["aft", "aft.", "after"]),
    ("BET", "range", ["bet", "bet.", "between", "btw", "betw"]),
    ("CAL", "calculated", ["cal", "cal.", "calculated"]),
    ("EST", "estimated", ["est", "est.", "estimated"]),
    ("INT", "interpreted", ["int", "int."]),
    ("FROM", "range_start", ["from", "since"]),
    ("TO", "range_end", ["to", "until"]),
]

for _code, _kind, _aliases in _QUALIFIERS:
    for _alias in _aliases:
        QUALIFIER_ALIASES[_alias] = (_code, _kind)


SEASON_ALIASES: Dict[str, str] = {
    "spring": "SPRING",
    "summer": "SUMMER",
    "autumn": "AUTUMN",
    "fall": "AUTUMN",
    "winter": "WINTER",
}

_ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}([T ].*)?$")
_ISO_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


@dataclass
class ParsedSimpleDate:
    """A single date portion with its qualifier already removed."""
    date: Optional[str]          # "YYYY", "YYYY-MM" or "YYYY-MM-DD"
    precision: Optional[str]     # "year", "month", "day"
    kind: str                    # "exact", "seasonal", "unknown"
    season: Optional[str] = None


_UNKNOWN = ParsedSimpleDate(date=None, precision=None, kind="unknown")


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

def _strip_calendar(raw: str) -> Tuple[str, Optional[str]]:
    """Remove a '(Julian)' suffix or '@#DJULIAN@' escape; return (base, calendar)."""
    s = raw.strip()
    calendar = None

    for escape, name in CALENDAR_ESCAPES.items():
        if s.upper().startswith(escape):
            s = s[len(escape):].strip()
            calendar = name
            break

    if s.endswith(")"):
        idx = s.rfind("(")
        if idx != -1:
            label = s[idx + 1 : -1].strip().upper()
            if label in CALENDAR_ALIASES:
                calendar = CALENDAR_ALIASES[label]
                s = s[:idx].strip()

    return s, calendar


def _parse_year(token: str) -> Optional[int]:
    token = token.strip()
    # "1750/51" dual-dated years keep the first year
    if "/" in token:
        token = token.split("/", 1)[0]
    if token.isdigit() and 3 <= len(token) <= 4:
        return int(token)
    return None


def _tokens(text: str) -> List[str]:
    return [t for t in text.replace(",", " ").split() if t]


def _parse_simple_date(text: str) -> ParsedSimpleDate:
    """
    Parse a date without qualifiers:

        '1900', 'JAN 1900', '1 JAN 1900', 'June 12 1950', 'spring 1880'
    """
    tokens = _tokens(text)
    if not tokens:
        return _UNKNOWN

    if len(tokens) == 2 and tokens[0].lower() in SEASON_ALIASES:
        year = _parse_year(tokens[1])
        if year is not None:
            return ParsedSimpleDate(
                date=f"{year:04d}",
                precision="year",
                kind="seasonal",
                season=SEASON_ALIASES[tokens[0].lower()],
            )
        return _UNKNOWN

    if len(tokens) == 1:
        year = _parse_year(tokens[0])
        if year is None:
            return _UNKNOWN
        return ParsedSimpleDate(date=f"{year:04d}", precision="year", kind="exact")

    if len(tokens) == 2:
        year = _parse_year(tokens[1])
        mon = MONTHS.get(tokens[0].upper())
        if year is None or mon is None:
            return _UNKNOWN
        return ParsedSimpleDate(date=f"{year:04d}-{mon:02d}", precision="month", kind="exact")

    if len(tokens) != 3:
        return _UNKNOWN

    # 'DD MON YYYY' (GEDCOM) or 'MON DD YYYY'
    first, second, year_token = tokens
    year = _parse_year(year_token)
    if first.isdigit() and second.upper() in MONTHS:
        day, mon = int(first), MONTHS[second.upper()]
    elif second.isdigit() and first.upper() in MONTHS:
        day, mon = int(second), MONTHS[first.upper()]
    else:
        return _UNKNOWN
    if year is None:
        return _UNKNOWN

    return ParsedSimpleDate(date=f"{year:04d}-{mon:02d}-{day:02d}", precision="day", kind="exact")


def _split_on(tokens: List[str], separators: Tuple[str, ...]) -> Optional[Tuple[List[str], List[str]]]:
    for i, t in enumerate(tokens):
        if t.lower() in separators:
            return tokens[:i], tokens[i + 1 :]
    return None


# ---------------------------------------------------------------------------
# Structured parse
# ---------------------------------------------------------------------------

def parse_date(raw: Any) -> Dict[str, Optional[str]]:
    """
    Parse a GEDCOM DATE value into a structured dictionary.

    Precision follows the input:
        - '1 JAN 1900' -> date='1900-01-01', precision='day'
        - 'JAN 1900'   -> date='1900-01',    precision='month'
        - '1900'       -> date='1900',       precision='year'

    Keys:
        raw         : original input (stripped)
        normalized  : canonical form of the date
        kind        : 'exact', 'approximate', 'before', 'after', 'range',
                      'calculated', 'estimated', 'interpreted', 'seasonal',
                      'unknown'
        modifier    : ABT, BEF, AFT, BET, CAL, EST, INT, FROM, TO or None
        date        : normalized simple date or None
        precision   : 'day', 'month', 'year' or None
        start, end  : range bounds for BET/AND and FROM/TO
        calendar    : 'GREGORIAN', 'JULIAN', ... or None
        season      : 'SPRING', 'SUMMER', 'AUTUMN', 'WINTER' or None
    """
    s = "" if raw is None else str(raw).strip()

    result: Dict[str, Optional[str]] = {
        "raw": s,
        "normalized": s,
        "kind": "unknown",
        "modifier": None,
        "date": None,
        "precision": None,
        "start": None,
        "end": None,
        "calendar": None,
        "season": None,
    }
    if not s:
        return result

    base, calendar = _strip_calendar(s)
    result["calendar"] = calendar

    # INT dates carry the original phrase in parentheses
    if "(" in base:
        base = base[: base.index("(")].strip()

    tokens = _tokens(base)
    if not tokens:
        return result

    head = tokens[0].lower()

    # Ranges: BET <d1> AND <d2>, FROM <d1> TO <d2>
    for modifier, separators in (("BET", ("and", "&")), ("FROM", ("to", "until"))):
        if QUALIFIER_ALIASES.get(head, (None,))[0] != modifier:
            continue
        split = _split_on(tokens[1:], separators)
        if split:
            left = _parse_simple_date(" ".join(split[0]))
            right = _parse_simple_date(" ".join(split[1]))
            result.update(
                kind="range",
                modifier=modifier,
                start=left.date,
                end=right.date,
                date=left.date,
                precision=left.precision,
                normalized=base,
            )
            return result

    modifier_code: Optional[str] = None
    modifier_kind: Optional[str] = None
    remaining = tokens
    if head in QUALIFIER_ALIASES:
        modifier_code, modifier_kind = QUALIFIER_ALIASES[head]
        remaining = tokens[1:]
    # 'prior to 1800'
    elif len(tokens) > 1 and f"{head} {tokens[1].lower()}" in QUALIFIER_ALIASES:
        modifier_code, modifier_kind = QUALIFIER_ALIASES[f"{head} {tokens[1].lower()}"]
        remaining = tokens[2:]

    if not remaining:
        result.update(kind=modifier_kind or "unknown", modifier=modifier_code, normalized=base)
        return result

    sd = _parse_simple_date(" ".join(remaining))

    result["date"] = sd.date
    result["precision"] = sd.precision
    result["season"] = sd.season
    result["normalized"] = sd.date or base
    result["modifier"] = modifier_code
    if sd.kind == "seasonal":
        result["kind"] = "seasonal"
    elif sd.date is None:
        result["kind"] = "unknown"
    else:
        result["kind"] = modifier_kind or sd.kind

    return result


# ---------------------------------------------------------------------------
# Date values
# ---------------------------------------------------------------------------

def _iso_to_date(iso: Optional[str]) -> Optional[date]:
    """'1950', '1950-06' or '1950-06-12' -> date (year/month fill with 1)."""
    if not iso:
        return None
    parts = [int(p) for p in iso.split("-")]
    while len(parts) < 3:
        parts.append(1)
    return date(parts[0], parts[1], parts[2])


def _to_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    s = str(value).strip()
    if not s:
        return None

    if _ISO_RE.match(s):
        if len(s) == 10:
            return date.fromisoformat(s)
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    if _ISO_MONTH_RE.match(s):
        return _iso_to_date(s)

    parsed = parse_date(s)
    return _iso_to_date(parsed["start"] if parsed["kind"] == "range" else parsed["date"])


def to_date(value: Any) -> Optional[date]:
    """
    Normalize a date-like value to ``datetime.date``, or None.

    Accepts GEDCOM phrases ("12 JUN 1950", "ABT 1900", "BET 1800 AND 1810"),
    ISO strings, and date/datetime objects. Never raises: empty, missing
    and unparseable input all give None.
    """
    try:
        return _to_date(value)
    except (ValueError, TypeError, OverflowError):
        return None


def to_date_range(value: Any) -> Tuple[Optional[date], Optional[date], bool]:
    """
    Return ``(start, end, is_range)`` for an event date.

    Only a BET/AND or FROM/TO phrase with both ends parseable is a range;
    everything else is ``(to_date(value), None, False)``.
    """
    if isinstance(value, str):
        try:
            parsed = parse_date(value)
            if parsed["kind"] == "range":
                start = _iso_to_date(parsed["start"])
                end = _iso_to_date(parsed["end"])
                if start is not None and end is not None:
                    return start, end, True
        except (ValueError, TypeError, OverflowError):
            pass
    return to_date(value), None, False

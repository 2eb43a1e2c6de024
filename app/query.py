# app/query.py
# Turns raw query-string values into the integers the catalog works with.
# An empty value counts as "not provided"; anything else that is not an
# integer is rejected with a 400 before the catalog is touched.
from __future__ import annotations

import re
from typing import Mapping

from flask import abort

from app.catalog import YearRange


# Optional minus sign, then ASCII digits only.
_YEAR_RE = re.compile(r"-?[0-9]+")


def _to_int_or_none(v):
    s = str(v).strip()
    if not _YEAR_RE.fullmatch(s):
        return None
    return int(s)


def optional_year(args: Mapping[str, str], key: str) -> int | None:
    raw = (args.get(key) or "").strip()
    if not raw:
        return None
    year = _to_int_or_none(raw)
    if year is None:
        abort(400, description=f"Query parameter '{key}' must be an integer, got {raw!r}")
    return year


def required_year(args: Mapping[str, str], key: str) -> int:
    """Like optional_year, but a missing or empty value is a client error."""
    year = optional_year(args, key)
    if year is None:
        abort(400, description=f"Missing query parameter '{key}'")
    return year


def year_range_from_args(args: Mapping[str, str]) -> YearRange:
    return YearRange(
        from_inclusive=optional_year(args, "year_from_inclusive"),
        to_exclusive=optional_year(args, "year_to_exclusive"),
    )

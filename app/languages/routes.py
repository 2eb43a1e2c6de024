# app/languages/routes.py
# Routes for the 'Languages' section: every page is a query over the shared
# catalog rendered through the same listing template.
from __future__ import annotations

from typing import Sequence

from flask import current_app, render_template, request

from app import CATALOG_KEY
from app.catalog import Language, LanguageCatalog, PARTITION_YEAR
from app.query import required_year, year_range_from_args
from . import languages_bp


# ---------- helpers ----------------------------------------------------------

def _catalog() -> LanguageCatalog:
    return current_app.extensions[CATALOG_KEY]


def render_languages(headline: str, languages: Sequence[Language]) -> str:
    """Bind a headline and an ordered list of languages to the listing page."""
    return render_template(
        "languages/index.html",
        headline=headline,
        languages=languages,
    )


def _by_year(year: int, source: str) -> str:
    found = _catalog().by_year(year)
    current_app.logger.debug(f"[languages.{source}] year={year} -> {len(found)} result(s)")
    return render_languages(f"Languages from {year}", found)


# ---------- pages ------------------------------------------------------------

@languages_bp.route("/")
def index():
    """All languages, in catalog order."""
    return render_languages("Languages", _catalog().all())


@languages_bp.route("/<int(signed=True):year>")
def by_year_path(year: int):
    """Languages that appeared in exactly `year`, taken from the path."""
    return _by_year(year, "by_year_path")


@languages_bp.route("/year")
def by_year_query():
    """
    Same as the path variant, but the year comes from `?year=`.
    The parameter is mandatory: missing, empty or non-numeric -> 400.
    """
    year = required_year(request.args, "year")
    return _by_year(year, "by_year_query")


@languages_bp.route("/range")
def by_range():
    """
    Languages with year_from_inclusive <= year < year_to_exclusive.
    Either bound may be left out (or sent empty) to leave that side open.
    """
    year_range = year_range_from_args(request.args)
    found = _catalog().by_range(year_range)
    current_app.logger.debug(f"[languages.by_range] {year_range} -> {len(found)} result(s)")
    return render_languages(year_range.headline(), found)


@languages_bp.route("/old-and-new")
def old_and_new():
    """Languages split into those before PARTITION_YEAR and the rest."""
    partition = _catalog().partition()
    return render_template(
        "languages/partition.html",
        old=partition.old,
        new=partition.new,
        partition_year=PARTITION_YEAR,
    )

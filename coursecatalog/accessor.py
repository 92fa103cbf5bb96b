"""
In-memory course catalog accessor.

Usage:

    catalog = CatalogAccessor()           # bundled data/Course-Subject.json
    if catalog.load() is None:
        ...                               # failure already logged
    catalog.search("data")
    catalog.modules_for("CS")

Rules:
- load() never raises; failure returns None and keeps the previous state
- read methods never raise; before a successful load they return [] / None
- records are never modified after load, queries only project and filter
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Optional

from coursecatalog.model import CourseColors, RadarPoint
from coursecatalog.presentation import derive_colors, derive_emoji, parse_radar_series
from coursecatalog.source import CatalogLoadError, fetch_catalog

logger = logging.getLogger(__name__)

NOT_LOADED_MSG = "Course data not loaded yet. Call load() first."
SEARCH_FIELDS = ("course_name", "overview", "short_overview")


def default_catalog_path() -> Path:
    """
    Return the path of the catalog bundled with the package.

    A function instead of a constant so tests can override it.
    """
    base_dir = Path(__file__).resolve().parent
    return base_dir / "data" / "Course-Subject.json"


def _year_key(year: int | str) -> str:
    return f"year_{year}"


class CatalogAccessor:
    """
    Read-mostly accessor over a list of course records.
    """

    def __init__(self, source: str | Path | None = None) -> None:
        self.source: str | Path = source if source is not None else default_catalog_path()
        self.records: Optional[list[dict[str, Any]]] = None
        self._loaded = False
        self._selected: Optional[dict[str, Any]] = None
        self._load_lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def selected(self) -> Optional[dict[str, Any]]:
        """
        Course most recently returned by find_by_acronym (informational only).
        """
        return self._selected

    # -----------------------------------------------------------------------
    # Loading
    # -----------------------------------------------------------------------

    def load(self, source: str | Path | None = None) -> Optional[list[dict[str, Any]]]:
        """
        Fetch and decode the catalog, then make it the in-memory data.

        Returns the course list, or None if fetching/decoding failed.
        Concurrent calls are serialised; the last one to finish wins.
        """
        target = source if source is not None else self.source
        with self._load_lock:
            try:
                records = fetch_catalog(target)
            except CatalogLoadError as exc:
                logger.error("Error loading course data: %s", exc)
                return None

            self.records = records
            self.source = target
            self._loaded = True

        logger.info("Loaded %d courses successfully", len(records))
        return records

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def list_all(self) -> list[dict[str, Any]]:
        if not self._loaded or self.records is None:
            logger.warning(NOT_LOADED_MSG)
            return []
        return self.records

    def find_by_acronym(self, acronym: str) -> Optional[dict[str, Any]]:
        """
        Return the first course whose acronym equals the input exactly.
        """
        if not self._loaded or self.records is None:
            logger.warning(NOT_LOADED_MSG)
            return None

        for course in self.records:
            if course.get("acronym") == acronym:
                self._selected = course
                return course
        return None

    def search(self, query: Optional[str]) -> list[dict[str, Any]]:
        """
        Case-insensitive substring search in name, overview and short overview.
        """
        if not self._loaded or self.records is None or not query:
            return []

        term = query.lower()
        matches: list[dict[str, Any]] = []
        for course in self.records:
            for field in SEARCH_FIELDS:
                if term in str(course.get(field) or "").lower():
                    matches.append(course)
                    break
        return matches

    def by_year(self, year: int | str) -> list[dict[str, Any]]:
        """
        Courses that have at least one module in the given year.
        """
        if not self._loaded or self.records is None:
            return []

        key = _year_key(year)
        out: list[dict[str, Any]] = []
        for course in self.records:
            modules = course.get("modules")
            if isinstance(modules, dict) and modules.get(key):
                out.append(course)
        return out

    # -----------------------------------------------------------------------
    # Modules
    # -----------------------------------------------------------------------

    def modules_for(self, acronym: str) -> list[dict[str, Any]]:
        """
        All modules of a course as one flat list, each tagged with its year.

        Years keep their stored order (not sorted), modules keep their
        order within a year. 'year_2' becomes year '2'.
        """
        course = self.find_by_acronym(acronym)
        by_year = course.get("modules") if course else None
        if not isinstance(by_year, dict) or not by_year:
            return []

        out: list[dict[str, Any]] = []
        for year_key, modules in by_year.items():
            if not isinstance(modules, list):
                continue
            year = str(year_key).replace("year_", "", 1)
            for module in modules:
                # non-object modules are wrapped so every entry can carry its year
                if isinstance(module, dict):
                    out.append({**module, "year": year})
                else:
                    out.append({"value": module, "year": year})
        return out

    def modules_for_year(self, acronym: str, year: int | str) -> list[Any]:
        course = self.find_by_acronym(acronym)
        by_year = course.get("modules") if course else None
        if not isinstance(by_year, dict) or not by_year:
            return []
        modules = by_year.get(_year_key(year))
        return modules if isinstance(modules, list) else []

    # -----------------------------------------------------------------------
    # Presentation
    # -----------------------------------------------------------------------

    def parse_radar_series(self, text: Optional[str]) -> list[RadarPoint]:
        return parse_radar_series(text)

    def derive_colors(self, acronym: str) -> CourseColors:
        return derive_colors(acronym)

    def derive_emoji(self, acronym: str) -> str:
        return derive_emoji(acronym)

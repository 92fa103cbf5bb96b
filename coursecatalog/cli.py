"""
CLI (Command Line Interface).

Quick terminal commands over the course catalog, e.g.:

    coursecatalog list
    coursecatalog show <acronym>
    coursecatalog search <text>
    coursecatalog year <n>
    coursecatalog modules <acronym> [--year <n>]

All commands accept --source to read another catalog file or URL.

Exit codes: 0 ok, 1 bad input / nothing found, 2 catalog could not be loaded.
"""

from __future__ import annotations

import argparse
import logging
import math
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from coursecatalog.accessor import CatalogAccessor
from coursecatalog.logger import setup_logging

console = Console()


def _safe_str(x: Any) -> str:
    return "" if x is None else str(x)


def _course_table(title: str, courses: list[dict[str, Any]], catalog: CatalogAccessor) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Acronym")
    table.add_column("")
    table.add_column("Course")
    for c in courses:
        acronym = _safe_str(c.get("acronym"))
        table.add_row(f"[bold cyan]{acronym}[/]", catalog.derive_emoji(acronym), _safe_str(c.get("course_name")))
    return table


def _module_label(module: Any) -> str:
    if isinstance(module, dict):
        for key in ("module_name", "name", "title"):
            if module.get(key):
                return _safe_str(module[key])
    return _safe_str(module)


def _cmd_list(args: argparse.Namespace, catalog: CatalogAccessor) -> int:
    courses = catalog.list_all()
    if not courses:
        console.print("No courses.")
        return 0
    console.print(_course_table(f"Courses ({len(courses)})", courses, catalog))
    return 0


def _cmd_show(args: argparse.Namespace, catalog: CatalogAccessor) -> int:
    """
    Print one course with its derived colors and radar values.
    """
    course = catalog.find_by_acronym(args.acronym)
    if course is None:
        console.print(f"Course not found: {args.acronym}")
        return 1

    acronym = _safe_str(course.get("acronym"))
    colors = catalog.derive_colors(acronym)
    console.print(f"{catalog.derive_emoji(acronym)} [bold]{acronym}[/] | {_safe_str(course.get('course_name'))}")
    console.print(f"Colors: primary={colors.primary} secondary={colors.secondary} accent={colors.accent}")

    overview = _safe_str(course.get("short_overview") or course.get("overview")).strip()
    if overview:
        console.print(overview)

    points = catalog.parse_radar_series(course.get("radar_data"))
    if points:
        table = Table(title="Radar", box=box.SIMPLE)
        table.add_column("Label")
        table.add_column("Value", justify="right")
        for p in points:
            if p.value is None or math.isnan(p.value):
                value = "-"
            else:
                value = f"{p.value:g}"
            table.add_row(p.label, value)
        console.print(table)
    return 0


def _cmd_search(args: argparse.Namespace, catalog: CatalogAccessor) -> int:
    query = (args.text or "").strip()
    if not query:
        console.print("Please provide a search text.")
        return 1

    matches = catalog.search(query)
    if not matches:
        console.print("No results.")
        return 0
    console.print(_course_table(f"Search results ({len(matches)})", matches, catalog))
    return 0


def _cmd_year(args: argparse.Namespace, catalog: CatalogAccessor) -> int:
    courses = catalog.by_year(args.year)
    if not courses:
        console.print(f"No courses with modules in year {args.year}.")
        return 0
    console.print(_course_table(f"Courses with year {args.year} modules", courses, catalog))
    return 0


def _cmd_modules(args: argparse.Namespace, catalog: CatalogAccessor) -> int:
    """
    Print all modules of a course (or only one year with --year).
    """
    if catalog.find_by_acronym(args.acronym) is None:
        console.print(f"Course not found: {args.acronym}")
        return 1

    if args.year is not None:
        modules = catalog.modules_for_year(args.acronym, args.year)
        rows = [(str(args.year), _module_label(m)) for m in modules]
    else:
        modules = catalog.modules_for(args.acronym)
        rows = [(_safe_str(m.get("year")), _module_label(m)) for m in modules]

    if not rows:
        console.print("No modules.")
        return 0

    table = Table(title=f"Modules of {args.acronym}", box=box.SIMPLE)
    table.add_column("Year", justify="right")
    table.add_column("Module")
    for year, label in rows:
        table.add_row(year, label)
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="coursecatalog", description="Course catalog CLI")
    parser.add_argument("--source", "-s", type=str, default=None, help="Catalog JSON file or URL")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show informational log messages")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all courses")

    p_show = sub.add_parser("show", help="Show one course")
    p_show.add_argument("acronym", type=str, help="Course acronym (e.g. CS)")

    p_search = sub.add_parser("search", help="Search courses")
    p_search.add_argument("text", type=str, help="Search text")

    p_year = sub.add_parser("year", help="Courses with modules in a year")
    p_year.add_argument("year", type=int, help="Year number (e.g. 1)")

    p_modules = sub.add_parser("modules", help="Modules of a course")
    p_modules.add_argument("acronym", type=str, help="Course acronym (e.g. CS)")
    p_modules.add_argument("--year", "-y", type=int, default=None, help="Only this year")

    return parser


COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "search": _cmd_search,
    "year": _cmd_year,
    "modules": _cmd_modules,
}


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, loads the catalog, dispatches to the
    command handler and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.INFO if args.verbose else logging.WARNING)

    catalog = CatalogAccessor(args.source)
    if catalog.load() is None:
        console.print(f"Could not load course data from: {catalog.source}")
        raise SystemExit(2)

    handler = COMMANDS.get(args.command)
    if handler is None:
        raise SystemExit(2)
    raise SystemExit(handler(args, catalog))

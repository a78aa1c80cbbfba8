"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import timedelta

from park_wildlife import __version__
from park_wildlife.config import Settings, get_settings
from park_wildlife.datasources.inaturalist import ObservationClient
from park_wildlife.logging_config import configure_logging
from park_wildlife.repository import RepositoryOptions, SpeciesRepository
from park_wildlife.schemas import Species
from park_wildlife.services.http import create_session


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="park-wildlife",
        description="Discover wildlife observed in Golden Gate Park",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Skip iNaturalist and use the bundled local species only",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    species_parser = subparsers.add_parser("species", help="List all known species")
    species_parser.add_argument(
        "--type",
        dest="species_type",
        choices=["all", "animal", "plant"],
        default="all",
        help="Restrict to animals or plants (default: all)",
    )
    species_parser.add_argument("--json", action="store_true", help="Print JSON instead of text")

    search_parser = subparsers.add_parser("search", help="Search species")
    search_parser.add_argument("query", help="Free-text search")
    search_parser.add_argument(
        "--type", dest="species_type", choices=["all", "animal", "plant"], default="all"
    )
    search_parser.add_argument("--category", default=None, help="e.g. bird, mammal, flower")
    search_parser.add_argument(
        "--local-only", action="store_true", help="Search the bundled dataset only"
    )

    seasonal_parser = subparsers.add_parser("seasonal", help="Species best seen in a month")
    seasonal_parser.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        default=None,
        metavar="1-12",
        help="Month number (default: current month)",
    )

    popular_parser = subparsers.add_parser("popular", help="Most popular species")
    popular_parser.add_argument("-n", type=int, default=10, help="How many (default: 10)")

    subparsers.add_parser("stats", help="Show data source statistics")

    return parser


def build_repository(settings: Settings, *, offline: bool = False) -> SpeciesRepository:
    """Wire a repository from settings."""
    client = ObservationClient(
        cache_ttl=timedelta(minutes=settings.client_cache_ttl_minutes),
        http=create_session(timeout=settings.http_timeout),
    )
    options = RepositoryOptions.from_settings(settings)
    if offline:
        options = options.model_copy(update={"use_api": False})
    return SpeciesRepository(
        client,
        options=options,
        cache_ttl=timedelta(minutes=settings.repository_cache_ttl_minutes),
    )


def _print_species(species: list[Species]) -> None:
    if not species:
        print("No species found.")
        return
    for s in species:
        months = ",".join(str(m) for m in s.seasonality.best_months)
        print(f"{s.id:<24} {s.display_name:<50} {s.category:<10} months={months}")


def cmd_info(_args: argparse.Namespace, settings: Settings) -> int:
    """Handle the 'info' command."""
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Use API: {settings.use_api}")
    return 0


def cmd_species(args: argparse.Namespace, repo: SpeciesRepository) -> int:
    """Handle the 'species' command."""
    species = repo.get_all_species()
    if args.species_type != "all":
        species = [s for s in species if s.type == args.species_type]
    if args.json:
        print(json.dumps([s.model_dump(mode="json") for s in species], indent=2))
    else:
        _print_species(species)
    return 0


def cmd_search(args: argparse.Namespace, repo: SpeciesRepository) -> int:
    """Handle the 'search' command."""
    results = repo.search(
        args.query,
        args.species_type,
        args.category,
        include_api=not args.local_only,
    )
    _print_species(results)
    return 0


def cmd_seasonal(args: argparse.Namespace, repo: SpeciesRepository) -> int:
    """Handle the 'seasonal' command."""
    _print_species(repo.get_seasonal(args.month))
    return 0


def cmd_popular(args: argparse.Namespace, repo: SpeciesRepository) -> int:
    """Handle the 'popular' command."""
    _print_species(repo.get_popular(args.n))
    return 0


def cmd_stats(_args: argparse.Namespace, repo: SpeciesRepository) -> int:
    """Handle the 'stats' command."""
    stats = repo.get_stats()
    state = repo.get_loading_state()
    print(f"Total: {stats.total}")
    print(f"iNaturalist species: {stats.api_count}")
    print(f"Local species: {stats.local_count}")
    print(f"Using API: {stats.is_using_api}")
    print(f"Using fallback: {stats.is_using_fallback}")
    print(f"Last updated: {stats.last_updated.isoformat() if stats.last_updated else 'never'}")
    if state.error:
        print(f"Error: {state.error}", file=sys.stderr)
    return 0


REPOSITORY_COMMANDS = {
    "species": cmd_species,
    "search": cmd_search,
    "seasonal": cmd_seasonal,
    "popular": cmd_popular,
    "stats": cmd_stats,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(
        "DEBUG" if args.debug or settings.debug else settings.log_level,
        json_output=settings.log_json,
    )

    if args.command == "info":
        return cmd_info(args, settings)

    handler = REPOSITORY_COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    with build_repository(settings, offline=args.offline) as repo:
        repo.load_initial_data()
        return handler(args, repo)


if __name__ == "__main__":
    sys.exit(main())

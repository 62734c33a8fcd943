"""Command-line entry point.

Usage:
    recipe-catalog [--snapshot PATH] nutrition RECIPE [--group-id GROUP]
    recipe-catalog [--snapshot PATH] groups
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING, Any

import orjson

from recipe_catalog.catalog import (
    InMemoryCatalogSource,
    RecipeNotFoundError,
    SnapshotLoadError,
    load_snapshot,
)
from recipe_catalog.core.config import get_settings
from recipe_catalog.observability.logging import bind_context, get_logger, setup_logging
from recipe_catalog.services.nutrition import calculate_recipe_nutrition


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipe_catalog.catalog import CatalogSnapshot
    from recipe_catalog.core.config import Settings

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_SNAPSHOT_ERROR = 1
EXIT_NOT_FOUND = 3


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="recipe-catalog",
        description="Inspect a recipe catalog snapshot.",
    )
    parser.add_argument(
        "--snapshot",
        help="Path to a JSON catalog snapshot (default: catalog.snapshot_path)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    nutrition = subparsers.add_parser(
        "nutrition",
        help="Print nutrition totals and per-serving values for a recipe",
    )
    nutrition.add_argument("recipe", help="Recipe slug or ID")
    nutrition.add_argument(
        "--group-id",
        help="Only look up recipes of one group (default: catalog.default_group_id)",
    )

    subparsers.add_parser("groups", help="List creator group IDs in the catalog")
    return parser


def nutrition_payload(
    snapshot: CatalogSnapshot,
    slug_or_id: str,
    group_id: str | None = None,
) -> dict[str, Any]:
    """Build the JSON document printed by the ``nutrition`` command.

    ``group_id`` only limits which recipes can be looked up. Ingredients are
    resolved against the whole catalog, since recipes share ingredients
    across groups.

    Raises:
        RecipeNotFoundError: If the recipe is not visible in ``snapshot``.
    """
    recipe = snapshot.filter_by_group(group_id).find_recipe(slug_or_id)
    summary = calculate_recipe_nutrition(recipe, snapshot.ingredients_by_key)

    if summary is None:
        return {"recipe": recipe.slug, "summary": None}

    return {
        "recipe": recipe.slug,
        "servings": recipe.servings,
        "totals": summary.totals.model_dump(exclude_none=True),
        "perServing": summary.per_serving(recipe.servings).model_dump(
            exclude_none=True
        ),
        "compatibleCount": summary.compatible_count,
        "totalCount": summary.total_count,
        "partial": summary.is_partial,
    }


def _write_json(payload: Any) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
    sys.stdout.write("\n")


def _live_snapshot(settings: Settings, path: str | None) -> CatalogSnapshot:
    snapshot_path = path or settings.catalog.snapshot_path
    if not snapshot_path:
        msg = "No snapshot given; pass --snapshot or set catalog.snapshot_path"
        raise SnapshotLoadError(msg)
    # Archived documents drop out the same way they do in the live store
    return InMemoryCatalogSource.from_snapshot(load_snapshot(snapshot_path)).snapshot()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Process exit code: 0 on success, 1 when the snapshot cannot be
        loaded, 3 when the recipe does not exist.
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(
        settings.logging.level,
        settings.logging.format,
        is_development=settings.is_development,
        log_file=settings.logging.file,
        stream=sys.stderr,
    )

    try:
        snapshot = _live_snapshot(settings, args.snapshot)
    except SnapshotLoadError as e:
        logger.error("Snapshot unavailable", error=e.message)
        return EXIT_SNAPSHOT_ERROR

    if args.command == "groups":
        _write_json(snapshot.group_ids())
        return EXIT_OK

    group_id = args.group_id or settings.catalog.default_group_id
    bind_context(recipe=args.recipe, group_id=group_id)
    try:
        payload = nutrition_payload(snapshot, args.recipe, group_id)
    except RecipeNotFoundError as e:
        logger.error("Recipe not found", identifier=e.identifier)
        return EXIT_NOT_FOUND

    _write_json(payload)
    return EXIT_OK

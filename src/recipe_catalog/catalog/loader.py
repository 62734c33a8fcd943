"""Load catalog snapshots exported from the document store as JSON."""

from __future__ import annotations

from pathlib import Path

import orjson
from pydantic import ValidationError

from recipe_catalog.catalog.exceptions import SnapshotLoadError
from recipe_catalog.catalog.snapshot import CatalogSnapshot
from recipe_catalog.observability.logging import get_logger


logger = get_logger(__name__)


def load_snapshot(path: Path | str) -> CatalogSnapshot:
    """Read a snapshot file.

    The file holds one JSON object with ``recipes``, ``ingredients`` and an
    optional ``suggestions`` array, each element a store document in its
    camelCase form.

    Args:
        path: Location of the JSON file.

    Returns:
        The validated snapshot. Archived documents are kept; wrap it in an
        InMemoryCatalogSource to get the live view.

    Raises:
        SnapshotLoadError: If the file cannot be read, parsed or validated.
    """
    snapshot_path = Path(path)

    try:
        raw = snapshot_path.read_bytes()
    except OSError as e:
        msg = f"Cannot read snapshot {snapshot_path}: {e}"
        raise SnapshotLoadError(msg, path=snapshot_path) from e

    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        msg = f"Snapshot {snapshot_path} is not valid JSON: {e}"
        raise SnapshotLoadError(msg, path=snapshot_path) from e

    try:
        snapshot = CatalogSnapshot.model_validate(data)
    except ValidationError as e:
        msg = (
            f"Snapshot {snapshot_path} does not match the catalog schema: "
            f"{e.error_count()} error(s)"
        )
        raise SnapshotLoadError(msg, path=snapshot_path) from e

    logger.info(
        "Loaded catalog snapshot",
        path=str(snapshot_path),
        recipes=len(snapshot.recipes),
        ingredients=len(snapshot.ingredients),
        suggestions=len(snapshot.suggestions),
    )
    return snapshot

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from fastapi import Request
from pydantic import ValidationError

from app.shared.config import Settings
from app.notes.schemas import parse_snapshot, render_readable

logger = logging.getLogger(__name__)

EMPTY_SNAPSHOT = b"[]"


class StoreError(Exception):
    """Filesystem failure on the compact store."""


class StoreNotFound(StoreError):
    pass


@dataclass(frozen=True)
class StorePaths:
    compact: Path
    readable: Path


def resolve_store_paths(settings: Settings) -> StorePaths:
    return StorePaths(
        compact=settings.DATA_DIR / settings.COMPACT_FILE,
        readable=settings.DATA_DIR / settings.READABLE_FILE,
    )


def _replace_file(path: Path, data: bytes) -> None:
    # temp file in the same directory, then rename over the target
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as out:
            out.write(data)
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


class SnapshotStore:
    """
    The compact store holds the last saved payload byte-for-byte.
    The readable store is an indented mirror, refreshed only when the
    payload parses as a notes collection.

    Callers that write must hold the WriteGate; this class does no locking.
    """

    def __init__(self, paths: StorePaths):
        self.paths = paths

    def bootstrap(self) -> None:
        """Create both stores holding an empty collection if the compact one is missing."""
        try:
            exists = self.paths.compact.exists()
        except OSError as e:
            logger.error("Error checking %s: %s", self.paths.compact.name, e)
            return
        if exists:
            logger.info("%s already exists, skipping default file creation", self.paths.compact.name)
            return

        for path, data in (
            (self.paths.compact, EMPTY_SNAPSHOT),
            (self.paths.readable, render_readable([])),
        ):
            try:
                _replace_file(path, data)
            except OSError as e:
                logger.error("Error creating default %s: %s", path.name, e)
            else:
                logger.info("Created default %s", path.name)

    def save(self, payload: bytes) -> bool:
        """
        Two-phase write. Phase 1 replaces the compact store and raises
        StoreError on failure. Phase 2 refreshes the readable store and only
        logs on failure. Returns True when the readable store was refreshed.
        """
        try:
            _replace_file(self.paths.compact, payload)
        except OSError as e:
            raise StoreError(f"Error saving to {self.paths.compact.name}: {e}") from e

        try:
            notes = parse_snapshot(payload)
        except ValidationError as e:
            logger.warning("Error parsing JSON data: %s", e.errors(include_url=False)[:1])
            return False

        try:
            _replace_file(self.paths.readable, render_readable(notes))
        except OSError as e:
            logger.warning("Error saving to %s: %s", self.paths.readable.name, e)
            return False

        logger.info("Data auto-saved to %s and %s", self.paths.compact.name, self.paths.readable.name)
        return True

    def load(self) -> bytes:
        try:
            return self.paths.compact.read_bytes()
        except FileNotFoundError as e:
            raise StoreNotFound("No saved data found") from e
        except OSError as e:
            raise StoreError(f"Error reading saved data: {e}") from e


# FastAPI dep
def get_store(request: Request) -> SnapshotStore:
    return request.app.state.store

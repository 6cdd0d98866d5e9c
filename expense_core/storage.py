"""Persistence utilities for the expense store."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from .exceptions import StorageError
from .logger import get_logger

logger = get_logger(__name__)


class JSONStorage:
    """Simple file-based JSON storage with crash-safe writes."""

    def __init__(self, base_path: Path) -> None:
        self._base_path = Path(base_path)
        try:
            self._base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Unable to create data directory {self._base_path}") from exc

    def path_for(self, resource: str) -> Path:
        return self._base_path / resource

    def load(self, resource: str) -> Dict[str, Any]:
        """Return the stored document, or an empty dict if none exists yet."""
        path = self.path_for(resource)
        if not path.exists():
            logger.debug("No data file at %s; starting empty", path)
            return {}
        try:
            with path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            logger.error("Corrupted JSON data in %s: %s", path, exc)
            raise StorageError(f"Corrupted JSON data in {path}") from exc
        except OSError as exc:
            logger.error("Unable to read %s: %s", path, exc)
            raise StorageError(f"Unable to read from {path}") from exc

        if not isinstance(payload, dict):
            raise StorageError(f"Expected object payload in {path}")
        logger.debug("Loaded %s", path)
        return payload

    def save(self, resource: str, document: Dict[str, Any]) -> None:
        path = self.path_for(resource)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            # os.replace is atomic on POSIX and Windows; the old file survives any earlier failure.
            os.replace(temp_path, path)
        except OSError as exc:
            logger.error("Unable to write %s: %s", path, exc)
            try:
                temp_path.unlink()
            except FileNotFoundError:
                pass
            except OSError:
                logger.warning("Could not remove temporary file %s", temp_path)
            raise StorageError(f"Unable to write to {path}") from exc
        logger.debug("Saved %s", path)

    @property
    def base_path(self) -> Path:
        return self._base_path

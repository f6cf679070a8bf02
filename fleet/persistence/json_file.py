"""Whole-collection JSON file for one contract type."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Generic, Sequence, Type, TypeVar

from pydantic import ValidationError

from fleet.contracts.common import FleetModel
from fleet.persistence.errors import CorruptDataError, NotPersistableError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FleetModel)


class JsonCollectionFile(Generic[T]):
    """Load and save a full collection as a pretty-printed JSON array.

    Serialization relies entirely on the contract's ``to_json_dict()``
    and ``from_json_dict()`` methods; there is no extra mapping layer.

    Saves never append or diff: the whole array is written to a temporary
    file in the same directory and swapped in with ``os.replace``, so a
    crash mid-write leaves the previous file intact.
    """

    def __init__(self, model_class: Type[T], path: str | Path):
        self._model_class = model_class
        self._path = Path(path)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def load(self) -> list[T]:
        """Read and validate every entry.

        Raises ``FileNotFoundError`` if the file is missing (callers check
        ``exists()`` first) and ``CorruptDataError`` if it cannot be parsed.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptDataError(self._path, f"not valid UTF-8: {exc}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptDataError(self._path, f"invalid JSON: {exc}") from exc

        if raw is None:
            return []
        if not isinstance(raw, list):
            raise CorruptDataError(
                self._path, f"expected a JSON array, got {type(raw).__name__}"
            )

        try:
            items = [self._model_class.from_json_dict(entry) for entry in raw]
        except ValidationError as exc:
            raise CorruptDataError(self._path, str(exc)) from exc

        logger.info("Loaded %d %s from %s", len(items), self._model_class.__name__, self._path)
        return items

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def save(self, items: Sequence[T]) -> None:
        """Overwrite the file with the whole collection."""
        try:
            payload = json.dumps(
                [item.to_json_dict() for item in items],
                indent=2,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as exc:
            raise NotPersistableError(self._path, f"serialization failed: {exc}") from exc

        directory = self._path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise NotPersistableError(self._path, str(exc)) from exc

        logger.info("Saved %d %s to %s", len(items), self._model_class.__name__, self._path)

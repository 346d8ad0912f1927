# data/store.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any

from shippy import config

logger = logging.getLogger(__name__)

# Storage keys
AUTH_KEY = "shippy_auth"
PRODUCTS_KEY = "shippy_products"
TEAM_KEY = "shippy_team_members"
SALARY_KEY = "shippy_salary"


class RecordStore:
    """
    Key/value store persisted as one JSON document per key under ``data_dir``.

    - load(key, default): absent key + default → default is written back and returned
    - save(key, value): always a full overwrite (tmp file + rename)
    - no schema validation: a broken document raises json.JSONDecodeError to the caller
    - no locking, last write wins
    """

    def __init__(self, data_dir: str | Path | None = None):
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _ensure_data_dir(self):
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def exists(self, key: str) -> bool:
        path = self._path(key)
        return path.exists() and bool(path.read_text(encoding="utf-8").strip())

    def load(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        raw = path.read_text(encoding="utf-8").strip() if path.exists() else ""
        if raw:
            return json.loads(raw)
        if default is None:
            return None
        # First load: persist the seed right away
        logger.info("seeding %s", key)
        self.save(key, default)
        return default

    def save(self, key: str, value: Any) -> None:
        self._ensure_data_dir()
        path = self._path(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(path)
        logger.debug("saved %s", key)

    def remove(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug("removed %s", key)

# logic/collection.py
from __future__ import annotations
import dataclasses
import logging
import uuid
from typing import Dict, Iterator, List, Optional

from shippy.data.seed import SAMPLE_PRODUCTS, SAMPLE_TEAM_MEMBERS
from shippy.data.store import PRODUCTS_KEY, TEAM_KEY, RecordStore
from shippy.models.product import Product
from shippy.models.team_member import TeamMember

logger = logging.getLogger(__name__)


class EntityCollection:
    """
    CRUD over one stored record list.

    Every mutation rebuilds the list and writes it back whole through the store.
    Records keep insertion order; nothing is ever sorted.
    Validation failures and unknown ids are silent no-ops.
    """
    record_cls = None
    storage_key: str = ""
    seed: List[Dict] = []
    required_fields = ("name",)

    def __init__(self, store: RecordStore):
        self.store = store
        raw = store.load(self.storage_key, default=[dict(item) for item in self.seed])
        self._records = [self.record_cls.from_dict(item) for item in raw]
        self.editing_id: Optional[str] = None  # at most one row in edit mode

    # ---------- read ----------
    @property
    def records(self) -> list:
        return list(self._records)

    def get(self, record_id: str):
        return next((r for r in self._records if r.id == record_id), None)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator:
        return iter(list(self._records))

    # ---------- write ----------
    def _save(self, records: list):
        # memory only follows a successful write
        self.store.save(self.storage_key, [r.to_dict() for r in records])
        self._records = records

    def _new_id(self) -> str:
        taken = {r.id for r in self._records}
        while True:
            new_id = uuid.uuid4().hex
            if new_id not in taken:
                return new_id

    def add(self, draft: Dict):
        """Append a new record built from ``draft``. Returns it, or None when a required field is blank."""
        values = dict(draft)
        values.pop("id", None)
        for name in self.required_fields:
            text = str(values.get(name) or "").strip()
            if not text:
                logger.debug("add to %s skipped: %s is empty", self.storage_key, name)
                return None
            values[name] = text

        record = self.record_cls(id=self._new_id(), **values)
        self._save(self._records + [record])
        return record

    def update(self, record_id: str, field: str, value):
        """Replace one field on the record with ``record_id``. The list is written back even when nothing matched."""
        names = {f.name for f in dataclasses.fields(self.record_cls)}
        if field not in names or field == "id":
            logger.debug("update on %s skipped: unknown field %r", self.storage_key, field)
            return
        updated = [
            dataclasses.replace(r, **{field: value}) if r.id == record_id else r
            for r in self._records
        ]
        self._save(updated)

    def remove(self, record_id: str):
        self._save([r for r in self._records if r.id != record_id])
        if self.editing_id == record_id:
            self.editing_id = None

    # ---------- edit mode ----------
    def begin_edit(self, record_id: str):
        # replaces whatever row was being edited before
        self.editing_id = record_id

    def end_edit(self):
        self.editing_id = None

    def is_editing(self, record_id: str) -> bool:
        return self.editing_id == record_id


class ProductCollection(EntityCollection):
    record_cls = Product
    storage_key = PRODUCTS_KEY
    seed = SAMPLE_PRODUCTS
    required_fields = ("name",)


class TeamCollection(EntityCollection):
    record_cls = TeamMember
    storage_key = TEAM_KEY
    seed = SAMPLE_TEAM_MEMBERS
    required_fields = ("name", "email")

"""Calculation history owned by the caller. The calculators never touch it."""

import logging
from collections import OrderedDict
from typing import Protocol
from uuid import UUID

from config.settings import settings
from egtax.models import CalculationRecord

logger = logging.getLogger(__name__)


class HistoryRepository(Protocol):
    """Storage for saved calculations."""

    def save(self, record: CalculationRecord) -> UUID: ...

    def list(self) -> list[CalculationRecord]: ...

    def get(self, record_id: UUID) -> CalculationRecord | None: ...

    def delete(self, record_id: UUID) -> bool: ...


class InMemoryHistoryRepository:
    """Keeps the most recent records in insertion order, evicting the oldest."""

    def __init__(self, max_records: int | None = None) -> None:
        if max_records is None:
            max_records = settings.history_max_records
        if max_records < 1:
            raise ValueError(f"max_records must be at least 1, got {max_records}")
        self.max_records = max_records
        self._records: OrderedDict[UUID, CalculationRecord] = OrderedDict()

    def save(self, record: CalculationRecord) -> UUID:
        self._records[record.id] = record
        self._records.move_to_end(record.id)
        while len(self._records) > self.max_records:
            evicted, _ = self._records.popitem(last=False)
            logger.debug("Evicted history record id=%s", evicted)
        return record.id

    def list(self) -> list[CalculationRecord]:
        """Saved records, newest first."""
        return list(reversed(self._records.values()))

    def get(self, record_id: UUID) -> CalculationRecord | None:
        return self._records.get(record_id)

    def delete(self, record_id: UUID) -> bool:
        """Remove a record. Returns True if it existed."""
        return self._records.pop(record_id, None) is not None

    def clear(self) -> None:
        self._records.clear()

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.memory import MemoryTable
from .model import Receipt, ReceiptItem
from .repository import ReceiptItemRepository, ReceiptRepository


class InMemoryReceiptRepository(ReceiptRepository):
    def __init__(self):
        self._table: MemoryTable[Receipt] = MemoryTable(Receipt, key_field="receipt_id")

    def get_by_id(self, receipt_id: int) -> Optional[Receipt]:
        return self._table.get(receipt_id)

    def get_by_number(self, receipt_number: str) -> Optional[Receipt]:
        return self._table.find(lambda r: r.receipt_number == receipt_number)

    def list_by_student(self, student_id: int) -> Sequence[Receipt]:
        return self._table.filter(lambda r: r.student_id == student_id)

    def list_all(self) -> Sequence[Receipt]:
        return self._table.all()

    def create(self, **fields: Any) -> Receipt:
        return self._table.insert(**fields, created_at=now_local())

    def update(self, receipt_id: int, changes: Mapping[str, Any]) -> Optional[Receipt]:
        return self._table.update(receipt_id, changes)

    def delete(self, receipt_id: int) -> bool:
        return self._table.delete(receipt_id)


class InMemoryReceiptItemRepository(ReceiptItemRepository):
    def __init__(self):
        self._table: MemoryTable[ReceiptItem] = MemoryTable(ReceiptItem, key_field="item_id")

    def list_by_receipt(self, receipt_id: int) -> Sequence[ReceiptItem]:
        return self._table.filter(lambda i: i.receipt_id == receipt_id)

    def create(self, **fields: Any) -> ReceiptItem:
        return self._table.insert(**fields)

    def update(self, item_id: int, changes: Mapping[str, Any]) -> Optional[ReceiptItem]:
        return self._table.update(item_id, changes)

    def delete(self, item_id: int) -> bool:
        return self._table.delete(item_id)

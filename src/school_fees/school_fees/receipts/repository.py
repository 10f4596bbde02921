from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Receipt, ReceiptItem


class ReceiptRepository(Protocol):
    def get_by_id(self, receipt_id: int) -> Optional[Receipt]:
        raise NotImplementedError

    def get_by_number(self, receipt_number: str) -> Optional[Receipt]:
        raise NotImplementedError

    def list_by_student(self, student_id: int) -> Sequence[Receipt]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Receipt]:
        raise NotImplementedError

    def create(self, **fields: Any) -> Receipt:
        raise NotImplementedError

    def update(self, receipt_id: int, changes: Mapping[str, Any]) -> Optional[Receipt]:
        raise NotImplementedError

    def delete(self, receipt_id: int) -> bool:
        raise NotImplementedError


class ReceiptItemRepository(Protocol):
    def list_by_receipt(self, receipt_id: int) -> Sequence[ReceiptItem]:
        raise NotImplementedError

    def create(self, **fields: Any) -> ReceiptItem:
        raise NotImplementedError

    def update(self, item_id: int, changes: Mapping[str, Any]) -> Optional[ReceiptItem]:
        raise NotImplementedError

    def delete(self, item_id: int) -> bool:
        raise NotImplementedError

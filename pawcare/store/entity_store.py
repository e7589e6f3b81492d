# pawcare/store/entity_store.py
"""
한 종류의 엔티티를 메모리에 순서대로 보관하는 저장소.

- ID 중복을 허용하지 않습니다. ID 발급은 엔티티를 만드는 쪽의 책임입니다.
- 변경(추가/수정/삭제)이 성공할 때마다 등록된 리스너에게 StoreChange 이벤트를 전달합니다.
- sort_key가 주어지면 추가/수정 후 안정 정렬로 순서를 다시 맞춥니다.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from pawcare.core.errors import DataValidationError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ChangeAction(Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    DELETED = "deleted"
    RESET = "reset"


@dataclass(frozen=True)
class StoreChange:
    store: str
    action: ChangeAction
    entity_ids: Tuple[str, ...]


Listener = Callable[[StoreChange], None]


class EntityStore(Generic[T]):
    """메모리 내 엔티티 컬렉션과 변경 알림을 담당합니다."""

    def __init__(self, name: str, id_field: str,
                 sort_key: Optional[Callable[[T], Any]] = None,
                 descending: bool = False):
        self.name = name
        self.id_field = id_field
        self._sort_key = sort_key
        self._descending = descending
        self._items: List[T] = []
        self._listeners: List[Listener] = []

    # --- 조회 ---
    def _id_of(self, entity: T) -> str:
        return getattr(entity, self.id_field)

    def _index_of(self, entity_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if self._id_of(item) == entity_id:
                return index
        return None

    def all(self) -> List[T]:
        """현재 저장소 순서 그대로의 스냅샷(복사본 리스트)을 반환합니다."""
        return list(self._items)

    def get(self, entity_id: str) -> Optional[T]:
        index = self._index_of(entity_id)
        return self._items[index] if index is not None else None

    def exists(self, entity_id: str) -> bool:
        return self._index_of(entity_id) is not None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())

    # --- 변경 ---
    def insert(self, entity: T) -> T:
        entity_id = self._id_of(entity)
        if self.exists(entity_id):
            raise DataValidationError(f"이미 존재하는 ID입니다: {entity_id}")
        self._items.append(entity)
        self._resort()
        self._emit(ChangeAction.INSERTED, [entity_id])
        return entity

    def replace(self, entity: T) -> T:
        entity_id = self._id_of(entity)
        index = self._index_of(entity_id)
        if index is None:
            raise NotFoundError(f"{self.name}에서 해당 ID를 찾을 수 없습니다: {entity_id}")
        self._items[index] = entity
        self._resort()
        self._emit(ChangeAction.UPDATED, [entity_id])
        return entity

    def remove(self, entity_id: str) -> T:
        index = self._index_of(entity_id)
        if index is None:
            raise NotFoundError(f"{self.name}에서 해당 ID를 찾을 수 없습니다: {entity_id}")
        removed = self._items.pop(index)
        self._emit(ChangeAction.DELETED, [entity_id])
        return removed

    def remove_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """조건에 맞는 모든 엔티티를 제거하고 제거된 목록을 반환합니다. 없으면 이벤트도 없습니다."""
        removed = [item for item in self._items if predicate(item)]
        if removed:
            self._items = [item for item in self._items if not predicate(item)]
            self._emit(ChangeAction.DELETED, [self._id_of(item) for item in removed])
        return removed

    def reset(self, entities: Iterable[T]) -> None:
        """저장소 내용을 통째로 교체합니다 (시드 데이터 적재용)."""
        items = list(entities)
        ids = [self._id_of(item) for item in items]
        if len(set(ids)) != len(ids):
            raise DataValidationError(f"{self.name} 초기 데이터에 중복 ID가 있습니다.")
        self._items = items
        self._resort()
        self._emit(ChangeAction.RESET, ids)

    def _resort(self) -> None:
        if self._sort_key is not None:
            # list.sort는 reverse=True에서도 안정 정렬이므로 같은 키는 삽입 순서를 유지합니다.
            self._items.sort(key=self._sort_key, reverse=self._descending)

    # --- 구독 ---
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """리스너를 등록하고, 등록을 해제하는 함수를 반환합니다."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, action: ChangeAction, entity_ids: List[str]) -> None:
        event = StoreChange(store=self.name, action=action, entity_ids=tuple(entity_ids))
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Store listener failed on {self.name} {action.value}: {e}", exc_info=True)

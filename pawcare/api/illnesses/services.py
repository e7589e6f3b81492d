# pawcare/api/illnesses/services.py
import logging
from typing import List, Optional, Sequence

from pawcare.api.base import BaseStoreService
from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.models.illness import Illness, IllnessCategory
from pawcare.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


class IllnessService(BaseStoreService):
    """
    질병 카탈로그 서비스.
    내장(predefined) 질병은 읽기 전용이고, 사용자 정의 질병만 추가/수정/삭제할 수 있습니다.
    """

    def __init__(self, custom_store: EntityStore[Illness],
                 predefined: Sequence[Illness] = (),
                 latency: float = 0.0):
        super().__init__(latency)
        self.custom = custom_store
        self._predefined = tuple(predefined)
        logger.info(f"IllnessService initialized with {len(self._predefined)} predefined illnesses.")

    # --- 조회 ---
    def predefined_illnesses(self) -> List[Illness]:
        return list(self._predefined)

    def custom_illnesses(self) -> List[Illness]:
        return self.custom.all()

    def get_all(self) -> List[Illness]:
        """내장 질병 뒤에 사용자 정의 질병을 이어 붙인 전체 목록."""
        return self.predefined_illnesses() + self.custom_illnesses()

    def get_illness(self, illness_id: str) -> Optional[Illness]:
        for illness in self._predefined:
            if illness.illness_id == illness_id:
                return illness
        return self.custom.get(illness_id)

    def illnesses_by_category(self, category: IllnessCategory) -> List[Illness]:
        return [i for i in self.get_all() if i.category == category]

    def _is_predefined_id(self, illness_id: str) -> bool:
        return any(i.illness_id == illness_id for i in self._predefined)

    # --- 변경 (사용자 정의 질병 전용) ---
    async def add_custom(self, illness: Illness) -> Illness:
        name = self._require_text(illness.name, "질병 이름은 비워둘 수 없습니다.")
        if self._is_predefined_id(illness.illness_id) or self.custom.exists(illness.illness_id):
            raise DataValidationError(f"이미 존재하는 질병 ID입니다: {illness.illness_id}")
        illness.name = name
        illness.is_predefined = False

        await self._simulate_latency()
        self.custom.insert(illness)
        logger.info(f"Custom illness '{illness.name}' added ({illness.category.value})")
        return illness

    async def update_custom(self, illness: Illness) -> Illness:
        """사용자 정의 질병만 수정할 수 있습니다. 내장 질병 ID는 NotFoundError."""
        if not self.custom.exists(illness.illness_id):
            raise NotFoundError("해당 ID의 사용자 정의 질병을 찾을 수 없습니다.")
        illness.name = self._require_text(illness.name, "질병 이름은 비워둘 수 없습니다.")
        illness.is_predefined = False

        await self._simulate_latency()
        self.custom.replace(illness)
        logger.info(f"Custom illness {illness.illness_id} updated")
        return illness

    async def delete_custom(self, illness_id: str) -> None:
        """사용자 정의 질병만 삭제할 수 있습니다. 내장 질병 ID는 NotFoundError."""
        if not self.custom.exists(illness_id):
            if self._is_predefined_id(illness_id):
                logger.warning(f"Rejected delete of predefined illness {illness_id}")
            raise NotFoundError("해당 ID의 사용자 정의 질병을 찾을 수 없습니다.")

        await self._simulate_latency()
        self.custom.remove(illness_id)
        logger.info(f"Custom illness {illness_id} deleted")

# pawcare/api/weight_records/services.py
import logging
from typing import List, Optional

from pawcare.api.base import BaseStoreService
from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.models.weight_record import WeightRecord, MIN_WEIGHT_KG, MAX_WEIGHT_KG
from pawcare.store.entity_store import EntityStore

logger = logging.getLogger(__name__)


class WeightRecordService(BaseStoreService):
    """
    체중 기록 서비스.
    저장소는 date 내림차순 정렬 옵션으로 생성되어 있어, 추가/수정 후에도 0번 인덱스가 항상 최신 기록입니다.
    """
    def __init__(self, record_store: EntityStore[WeightRecord], latency: float = 0.0):
        super().__init__(latency)
        self.records = record_store
        logger.info("WeightRecordService initialized.")

    def get_record(self, record_id: str) -> Optional[WeightRecord]:
        return self.records.get(record_id)

    def weight_records_for_pet(self, pet_id: str) -> List[WeightRecord]:
        """반려동물의 체중 기록을 최신순으로 반환합니다. 같은 날짜는 저장소 순서를 유지합니다."""
        return sorted((r for r in self.records.all() if r.pet_id == pet_id),
                      key=lambda r: r.date, reverse=True)

    def _validate(self, record: WeightRecord) -> None:
        if not (record.pet_id or "").strip():
            raise DataValidationError("반려동물 ID는 필수입니다.")
        if not (MIN_WEIGHT_KG <= record.weight <= MAX_WEIGHT_KG):
            raise DataValidationError(f"체중은 {MIN_WEIGHT_KG}kg 이상 {MAX_WEIGHT_KG}kg 이하여야 합니다.")

    async def add_weight_record(self, record: WeightRecord) -> WeightRecord:
        self._validate(record)
        if self.records.exists(record.record_id):
            raise DataValidationError(f"이미 존재하는 기록 ID입니다: {record.record_id}")

        await self._simulate_latency()
        self.records.insert(record)
        logger.info(f"Weight record created for pet {record.pet_id}: {record.weight}kg")
        return record

    async def update_weight_record(self, record: WeightRecord) -> WeightRecord:
        if not self.records.exists(record.record_id):
            raise NotFoundError("해당 ID의 체중 기록을 찾을 수 없습니다.")
        self._validate(record)

        await self._simulate_latency()
        self.records.replace(record)
        logger.info(f"Weight record {record.record_id} updated")
        return record

    async def delete_weight_record(self, record_id: str) -> None:
        if not self.records.exists(record_id):
            raise NotFoundError("해당 ID의 체중 기록을 찾을 수 없습니다.")

        await self._simulate_latency()
        self.records.remove(record_id)
        logger.info(f"Weight record {record_id} deleted")

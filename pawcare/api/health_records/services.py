# pawcare/api/health_records/services.py
import logging
from datetime import datetime
from typing import List, Optional

from pawcare.api.base import BaseStoreService
from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.models.health_record import HealthRecord, RecordType, Severity
from pawcare.store.entity_store import EntityStore
from pawcare.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)


class HealthRecordService(BaseStoreService):
    """건강 기록의 생성/수정/삭제와 반려동물별 조회를 전담하는 서비스 클래스."""
    def __init__(self, record_store: EntityStore[HealthRecord], latency: float = 0.0):
        super().__init__(latency)
        self.records = record_store
        logger.info("HealthRecordService initialized.")

    # --- 조회 (저장소를 변경하지 않음) ---
    def get_record(self, record_id: str) -> Optional[HealthRecord]:
        return self.records.get(record_id)

    def records_for_pet(self, pet_id: str,
                        record_type: Optional[RecordType] = None,
                        severity: Optional[Severity] = None,
                        within_last_days: Optional[int] = None,
                        search: Optional[str] = None,
                        now: Optional[datetime] = None) -> List[HealthRecord]:
        """
        pet_id가 일치하는 기록을 저장소 순서 그대로 반환합니다. 정렬은 호출자가 따로 합니다.

        Args:
            record_type: 기록 종류 일치 필터
            severity: 심각도 일치 필터
            within_last_days: timestamp >= (now - N일) 인 기록만 유지
            search: 제목/설명/메모/수의사 이름에 대한 대소문자 무시 부분 문자열 검색
            now: 기준 시각. 호출마다 한 번만 계산해 모든 기록에 같은 기준을 적용합니다.
        """
        results = [r for r in self.records.all() if r.pet_id == pet_id]

        if record_type is not None:
            results = [r for r in results if r.record_type == record_type]
        if severity is not None:
            results = [r for r in results if r.severity == severity]
        if within_last_days is not None:
            if within_last_days < 0:
                raise DataValidationError("조회 기간(일)은 0 이상이어야 합니다.")
            cutoff = DateTimeUtils.days_ago(within_last_days, now)
            results = [r for r in results if r.timestamp >= cutoff]
        if search:
            needle = search.strip().lower()
            results = [r for r in results if needle in self._searchable_text(r)]
        return results

    def records_sorted_by_date(self, pet_id: str, **filters) -> List[HealthRecord]:
        """records_for_pet 결과를 최신순으로 정렬합니다. 같은 시각이면 저장소 순서를 유지합니다."""
        return sorted(self.records_for_pet(pet_id, **filters), key=lambda r: r.timestamp, reverse=True)

    @staticmethod
    def _searchable_text(record: HealthRecord) -> str:
        parts = [record.title, record.description, record.notes or "", record.veterinarian or ""]
        return " ".join(parts).lower()

    # --- 검증 ---
    def _validate(self, record: HealthRecord) -> str:
        """검증에 성공하면 공백을 제거한 제목을 반환합니다."""
        title = self._require_text(record.title, "기록 제목은 비워둘 수 없습니다.")
        self._require_text(record.pet_id, "반려동물 ID는 필수입니다.")
        return title

    # --- 변경 ---
    async def add_health_record(self, record: HealthRecord) -> HealthRecord:
        title = self._validate(record)
        if self.records.exists(record.record_id):
            raise DataValidationError(f"이미 존재하는 기록 ID입니다: {record.record_id}")
        record.title = title

        await self._simulate_latency()
        self.records.insert(record)
        logger.info(f"Health record created for pet {record.pet_id} (type: {record.record_type.value})")
        return record

    async def update_health_record(self, record: HealthRecord) -> HealthRecord:
        if not self.records.exists(record.record_id):
            raise NotFoundError("해당 ID의 건강 기록을 찾을 수 없습니다.")
        record.title = self._validate(record)

        await self._simulate_latency()
        self.records.replace(record)
        logger.info(f"Health record {record.record_id} updated")
        return record

    async def delete_health_record(self, record_id: str) -> None:
        if not self.records.exists(record_id):
            raise NotFoundError("해당 ID의 건강 기록을 찾을 수 없습니다.")

        await self._simulate_latency()
        self.records.remove(record_id)
        logger.info(f"Health record {record_id} deleted")

# pawcare/api/summary/services.py
"""
건강 데이터 요약/지표 서비스
체중 추세, 다음 접종 예정일, 기간별 기록 집계를 계산합니다. 모든 메서드는 읽기 전용입니다.
"""

import logging
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional

from pawcare.api.health_records.services import HealthRecordService
from pawcare.api.weight_records.services import WeightRecordService
from pawcare.models.health_record import RecordType
from pawcare.models.summary import HealthSummary, TimeRange
from pawcare.models.weight_record import WeightRecord
from pawcare.utils.datetime_utils import DateTimeUtils

logger = logging.getLogger(__name__)

WEIGHT_DELTA_PRECISION = 2


class SummaryService:
    """
    반려동물 건강 지표 계산을 담당하는 서비스
    """

    def __init__(self, health_record_service: HealthRecordService,
                 weight_record_service: WeightRecordService):
        self.health_records = health_record_service
        self.weight_records = weight_record_service

    def latest_weight(self, pet_id: str) -> Optional[WeightRecord]:
        """가장 최근 날짜의 체중 기록. 기록이 없으면 None."""
        records = self.weight_records.weight_records_for_pet(pet_id)
        return records[0] if records else None

    def weight_delta(self, pet_id: str) -> Optional[float]:
        """
        최근 체중 - 직전 체중. 양수면 체중이 늘었다는 뜻입니다.
        기록이 2개 미만이면 None (0이 아님). 결과는 소수 둘째 자리로 반올림합니다.
        """
        records = self.weight_records.weight_records_for_pet(pet_id)
        if len(records) < 2:
            return None
        return round(records[0].weight - records[1].weight, WEIGHT_DELTA_PRECISION)

    def next_vaccination_due(self, pet_id: str) -> Optional[datetime]:
        """
        알림일(reminder_date)이 설정된 접종 기록 중 가장 이른 알림일.
        알림일이 없는 접종 기록은 고려하지 않습니다. 이미 지난 알림일도 '기한 경과'로서 그대로 반환합니다.
        """
        reminders = [
            r.reminder_date
            for r in self.health_records.records_for_pet(pet_id, record_type=RecordType.VACCINATION)
            if r.reminder_date is not None
        ]
        return min(reminders) if reminders else None

    def health_summary(self, pet_id: str, time_range: TimeRange,
                       now: Optional[datetime] = None) -> HealthSummary:
        """
        기간(time_range.days) 안의 기록 수와 종류별/심각도별 개수를 집계합니다.
        now는 한 번만 계산되어 모든 기록에 같은 기준으로 적용됩니다.
        """
        now = now or DateTimeUtils.now()
        records = self.health_records.records_for_pet(pet_id, within_last_days=time_range.days, now=now)
        return HealthSummary(
            pet_id=pet_id,
            time_range=time_range,
            total_records=len(records),
            by_record_type=dict(Counter(r.record_type.value for r in records)),
            by_severity=dict(Counter(r.severity.value for r in records)),
        )

    def pet_overview(self, pet_id: str, time_range: TimeRange = TimeRange.MONTHLY) -> Dict[str, Any]:
        """홈 화면용 종합 지표 (최근 체중, 체중 변화, 다음 접종 예정일, 기간 요약)."""
        latest = self.latest_weight(pet_id)
        summary = self.health_summary(pet_id, time_range)
        logger.debug(f"Overview computed for pet {pet_id} ({time_range.value}): {summary.total_records} records")
        return {
            'pet_id': pet_id,
            'latest_weight': latest.to_dict() if latest else None,
            'weight_delta': self.weight_delta(pet_id),
            'next_vaccination_due': self.next_vaccination_due(pet_id),
            'health_summary': summary.to_dict(),
        }

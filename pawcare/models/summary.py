# pawcare/models/summary.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class TimeRange(Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"

    @property
    def days(self) -> int:
        """달력 경계가 아닌 고정 폭(일)의 근사 기간."""
        return _TIME_RANGE_DAYS[self]


_TIME_RANGE_DAYS = {
    TimeRange.WEEKLY: 7,
    TimeRange.MONTHLY: 30,
    TimeRange.QUARTERLY: 90,
    TimeRange.YEARLY: 365,
}


@dataclass
class HealthSummary:
    """기간 내 건강 기록 집계 결과."""
    pet_id: str
    time_range: TimeRange
    total_records: int
    by_record_type: Dict[str, int] = field(default_factory=dict)
    by_severity: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            'pet_id': self.pet_id,
            'time_range': self.time_range.value,
            'days': self.time_range.days,
            'total_records': self.total_records,
            'by_record_type': dict(self.by_record_type),
            'by_severity': dict(self.by_severity),
        }

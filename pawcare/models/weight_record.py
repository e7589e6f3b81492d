# pawcare/models/weight_record.py
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from pawcare.utils.datetime_utils import DateTimeUtils

# 체중 입력 허용 범위 (kg)
MIN_WEIGHT_KG = 0.5
MAX_WEIGHT_KG = 15.0


@dataclass
class WeightRecord:
    """
    'weight_records' 저장소의 엔티티 구조.
    저장소는 항상 date 내림차순으로 유지되므로 0번 인덱스가 가장 최근 기록입니다.
    """
    record_id: str
    pet_id: str
    weight: float  # kg
    date: datetime
    notes: Optional[str] = None

    def __post_init__(self):
        self.date = DateTimeUtils.validate_datetime_field(self.date, 'date')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeightRecord":
        processed_data = data.copy()
        processed_data['weight'] = float(processed_data['weight'])
        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

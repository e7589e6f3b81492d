# pawcare/models/health_record.py
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum
import uuid

from pawcare.utils.datetime_utils import DateTimeUtils


class RecordType(Enum):
    VACCINATION = "vaccination"
    MEDICATION = "medication"
    VET_VISIT = "vet_visit"
    SYMPTOM = "symptom"


class Severity(Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class FileType(Enum):
    IMAGE = "image"
    VIDEO = "video"
    DOCUMENT = "document"
    PDF = "pdf"


@dataclass
class Attachment:
    """건강 기록에 첨부된 파일의 메타데이터. 파일 자체는 저장하지 않습니다."""
    file_name: str
    file_type: FileType
    file_path: str
    attachment_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    size: Optional[int] = None  # bytes
    uploaded_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attachment":
        processed_data = {k: v for k, v in data.items() if v is not None}
        if isinstance(processed_data.get('file_type'), str):
            processed_data['file_type'] = FileType(processed_data['file_type'])
        if 'uploaded_at' in processed_data:
            processed_data['uploaded_at'] = DateTimeUtils.validate_datetime_field(processed_data['uploaded_at'], 'uploaded_at')
        return cls(**processed_data)


@dataclass
class HealthRecord:
    """
    'health_records' 저장소의 엔티티 구조.
    특정 반려동물에게 일어난 의료 이벤트(접종, 투약, 진료, 증상)를 시간과 함께 기록합니다.
    pet_id, illness_id는 조회용 약한 참조이며 소유 관계가 아닙니다.
    """
    record_id: str
    pet_id: str
    title: str
    timestamp: datetime
    record_type: RecordType = RecordType.SYMPTOM
    severity: Severity = Severity.MILD
    description: str = ""
    illness_id: Optional[str] = None
    veterinarian: Optional[str] = None
    notes: Optional[str] = None
    reminder_date: Optional[datetime] = None  # 접종 유효기간/다음 일정 알림의 단일 기준 필드
    attachments: List[Attachment] = field(default_factory=list)

    def __post_init__(self):
        self.timestamp = DateTimeUtils.validate_datetime_field(self.timestamp, 'timestamp')
        if self.reminder_date is not None:
            self.reminder_date = DateTimeUtils.validate_datetime_field(self.reminder_date, 'reminder_date')

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HealthRecord":
        """요청 데이터로부터 HealthRecord를 생성합니다. Enum/날짜/첨부파일을 변환합니다."""
        processed_data = data.copy()

        if isinstance(processed_data.get('record_type'), str):
            processed_data['record_type'] = RecordType(processed_data['record_type'])
        elif processed_data.get('record_type') is None:
            processed_data.pop('record_type', None)

        if isinstance(processed_data.get('severity'), str):
            processed_data['severity'] = Severity(processed_data['severity'])
        elif processed_data.get('severity') is None:
            processed_data.pop('severity', None)

        if processed_data.get('description') is None:
            processed_data['description'] = ""

        processed_data['attachments'] = [
            a if isinstance(a, Attachment) else Attachment.from_dict(a)
            for a in processed_data.get('attachments') or []
        ]
        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        record_dict = asdict(self)
        record_dict['record_type'] = self.record_type.value
        record_dict['severity'] = self.severity.value
        for attachment_dict, attachment in zip(record_dict['attachments'], self.attachments):
            attachment_dict['file_type'] = attachment.file_type.value
        return record_dict

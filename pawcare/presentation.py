# pawcare/presentation.py
"""
UI 표시용 매핑 테이블 (표시 이름, 아이콘, 색상).
도메인 Enum은 표시 정보를 갖지 않으며, 화면에 필요한 정보는 여기서만 관리합니다.
"""

from typing import Any, Dict, Optional

from pawcare.models.health_record import FileType, RecordType, Severity
from pawcare.models.illness import Illness, IllnessCategory
from pawcare.models.pet import PetGender, Species
from pawcare.models.summary import TimeRange
from pawcare.models.user import Language

RECORD_TYPE_DISPLAY = {
    RecordType.VACCINATION: {"display_name": "Vaccination", "icon": "syringe", "color": "blue"},
    RecordType.MEDICATION: {"display_name": "Medication", "icon": "pills", "color": "green"},
    RecordType.VET_VISIT: {"display_name": "Vet Visit", "icon": "stethoscope", "color": "purple"},
    RecordType.SYMPTOM: {"display_name": "Symptom", "icon": "exclamationmark.triangle", "color": "orange"},
}

SEVERITY_DISPLAY = {
    Severity.MILD: {"display_name": "Mild", "icon": "circle.fill", "color": "green"},
    Severity.MODERATE: {"display_name": "Moderate", "icon": "circle.fill", "color": "orange"},
    Severity.SEVERE: {"display_name": "Severe", "icon": "circle.fill", "color": "red"},
}

FILE_TYPE_DISPLAY = {
    FileType.IMAGE: {"display_name": "Image", "icon": "photo"},
    FileType.VIDEO: {"display_name": "Video", "icon": "video"},
    FileType.DOCUMENT: {"display_name": "Document", "icon": "doc"},
    FileType.PDF: {"display_name": "PDF", "icon": "doc.richtext"},
}

ILLNESS_CATEGORY_DISPLAY = {
    IllnessCategory.RESPIRATORY: {"display_name": "Respiratory", "icon": "lungs.fill"},
    IllnessCategory.DIGESTIVE: {"display_name": "Digestive", "icon": "stomach.fill"},
    IllnessCategory.SKIN: {"display_name": "Skin", "icon": "pawprint.fill"},
    IllnessCategory.DENTAL: {"display_name": "Dental", "icon": "tooth.fill"},
    IllnessCategory.EYE: {"display_name": "Eye", "icon": "eye.fill"},
    IllnessCategory.EAR: {"display_name": "Ear", "icon": "ear.fill"},
    IllnessCategory.OTHER: {"display_name": "Other", "icon": "cross.fill"},
}

SPECIES_DISPLAY = {
    Species.CAT: {"display_name": "Cat"},
    Species.DOG: {"display_name": "Dog"},
    Species.OTHER: {"display_name": "Other"},
}

GENDER_DISPLAY = {
    PetGender.MALE: {"display_name": "Male"},
    PetGender.FEMALE: {"display_name": "Female"},
    PetGender.UNKNOWN: {"display_name": "Unknown"},
}

LANGUAGE_DISPLAY = {
    Language.ENGLISH: {"display_name": "English"},
    Language.SIMPLIFIED_CHINESE: {"display_name": "简体中文"},
    Language.TRADITIONAL_CHINESE: {"display_name": "繁體中文"},
}

TIME_RANGE_DISPLAY = {time_range: {"display_name": time_range.value.capitalize()} for time_range in TimeRange}

_TABLES = {
    'record_type': RECORD_TYPE_DISPLAY,
    'severity': SEVERITY_DISPLAY,
    'file_type': FILE_TYPE_DISPLAY,
    'illness_category': ILLNESS_CATEGORY_DISPLAY,
    'species': SPECIES_DISPLAY,
    'gender': GENDER_DISPLAY,
    'language': LANGUAGE_DISPLAY,
    'time_range': TIME_RANGE_DISPLAY,
}


def illness_icon(illness: Illness) -> Optional[str]:
    """질병 자체 아이콘이 없으면 카테고리 아이콘을 사용합니다."""
    return illness.icon or ILLNESS_CATEGORY_DISPLAY[illness.category]["icon"]


def presentation_tables() -> Dict[str, Dict[str, Dict[str, Any]]]:
    """모든 매핑 테이블을 Enum 값(문자열) 키로 변환해 반환합니다 (GET /api/meta/presentation)."""
    return {
        name: {member.value: dict(info) for member, info in table.items()}
        for name, table in _TABLES.items()
    }

# pawcare/models/illness.py
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any
from enum import Enum
import uuid

from pawcare.models.health_record import Severity


class IllnessCategory(Enum):
    RESPIRATORY = "respiratory"
    DIGESTIVE = "digestive"
    SKIN = "skin"
    DENTAL = "dental"
    EYE = "eye"
    EAR = "ear"
    OTHER = "other"


class Commonality(Enum):
    """해당 질병에서 증상이 나타나는 빈도"""
    RARE = "rare"
    SOMETIMES = "sometimes"
    COMMON = "common"
    VERY_COMMON = "very_common"


@dataclass
class Symptom:
    name: str
    commonality: Commonality = Commonality.COMMON
    typical_severity: Severity = Severity.MILD
    symptom_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Symptom":
        processed_data = {k: v for k, v in data.items() if v is not None}
        if isinstance(processed_data.get('commonality'), str):
            processed_data['commonality'] = Commonality(processed_data['commonality'])
        if isinstance(processed_data.get('typical_severity'), str):
            processed_data['typical_severity'] = Severity(processed_data['typical_severity'])
        return cls(**processed_data)


@dataclass
class Illness:
    """
    질병 카탈로그 항목.
    is_predefined=True 인 항목은 불변 시드 데이터이며, 사용자는 사용자 정의 항목만 추가/수정/삭제할 수 있습니다.
    """
    illness_id: str
    name: str
    category: IllnessCategory
    description: str = ""
    icon: Optional[str] = None
    is_predefined: bool = False
    symptoms: List[Symptom] = field(default_factory=list)
    aliases: List[str] = field(default_factory=list)
    contagious: bool = False
    emergency_warning: bool = False
    home_care_tips: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Illness":
        processed_data = data.copy()
        if isinstance(processed_data.get('category'), str):
            processed_data['category'] = IllnessCategory(processed_data['category'])
        processed_data['symptoms'] = [
            s if isinstance(s, Symptom) else Symptom.from_dict(s)
            for s in processed_data.get('symptoms') or []
        ]
        if processed_data.get('aliases') is None:
            processed_data['aliases'] = []
        if processed_data.get('description') is None:
            processed_data['description'] = ""
        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        illness_dict = asdict(self)
        illness_dict['category'] = self.category.value
        for symptom_dict, symptom in zip(illness_dict['symptoms'], self.symptoms):
            symptom_dict['commonality'] = symptom.commonality.value
            symptom_dict['typical_severity'] = symptom.typical_severity.value
        return illness_dict


# 앱에 내장된 기본 질병 카탈로그. 아이콘 이름은 presentation 계층이 카테고리로부터 결정합니다.
PREDEFINED_ILLNESSES: List[Illness] = [
    Illness(illness_id="1", name="Upper Respiratory Infection", category=IllnessCategory.RESPIRATORY,
            description="Common cold-like symptoms in cats", is_predefined=True,
            symptoms=[Symptom(symptom_id="1-1", name="Sneezing", commonality=Commonality.VERY_COMMON),
                      Symptom(symptom_id="1-2", name="Nasal discharge", commonality=Commonality.COMMON),
                      Symptom(symptom_id="1-3", name="Fever", commonality=Commonality.SOMETIMES,
                              typical_severity=Severity.MODERATE)],
            aliases=["Cat flu", "URI"], contagious=True),
    Illness(illness_id="2", name="Vomiting", category=IllnessCategory.DIGESTIVE,
            description="Gastrointestinal upset", is_predefined=True),
    Illness(illness_id="3", name="Skin Allergy", category=IllnessCategory.SKIN,
            description="Itchy skin and rashes", is_predefined=True),
    Illness(illness_id="4", name="Dental Disease", category=IllnessCategory.DENTAL,
            description="Gum disease and tooth decay", is_predefined=True),
    Illness(illness_id="5", name="Conjunctivitis", category=IllnessCategory.EYE,
            description="Eye inflammation", is_predefined=True, contagious=True),
    Illness(illness_id="6", name="Ear Infection", category=IllnessCategory.EAR,
            description="Bacterial or fungal ear infection", is_predefined=True),
]

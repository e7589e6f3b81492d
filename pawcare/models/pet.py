# pawcare/models/pet.py
from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from typing import Optional, List, Dict, Any
from enum import Enum
import logging

from pawcare.utils.datetime_utils import DateTimeUtils


class Species(Enum):
    CAT = "cat"
    DOG = "dog"
    OTHER = "other"


class PetGender(Enum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


# 종별 품종 추천 목록 (UI 자동완성용)
COMMON_BREEDS: Dict[Species, List[str]] = {
    Species.CAT: ["Domestic Shorthair", "British Shorthair", "Siamese", "Persian",
                  "Ragdoll", "Bengal", "Maine Coon"],
    Species.DOG: ["Labrador Retriever", "Golden Retriever", "French Bulldog", "Poodle",
                  "German Shepherd", "Shiba Inu", "Corgi"],
    Species.OTHER: [],
}


def common_breeds(species: Species) -> List[str]:
    """종에 해당하는 대표 품종 목록의 복사본을 반환합니다."""
    return list(COMMON_BREEDS.get(species, []))


def normalize_tags(values: Optional[List[str]]) -> List[str]:
    """
    알레르기/만성질환처럼 집합 성격을 가진 문자열 목록을 정규화합니다.
    앞뒤 공백 제거, 빈 값 제거, 대소문자 무시 중복 제거 (처음 등장 순서 유지).
    """
    seen = set()
    result = []
    for value in values or []:
        cleaned = (value or "").strip()
        if not cleaned or cleaned.lower() in seen:
            continue
        seen.add(cleaned.lower())
        result.append(cleaned)
    return result


@dataclass
class Pet:
    """
    'pets' 저장소의 엔티티 구조.
    반려동물의 정체성(Identity)과 관련된 정적 데이터를 관리합니다.
    나이(age)는 저장하지 않고 항상 birth_date로부터 계산합니다.
    """
    pet_id: str
    name: str
    breed: str
    birth_date: date
    gender: PetGender
    species: Species = Species.CAT
    owner_id: Optional[str] = None
    is_neutered: bool = False
    allergens: List[str] = field(default_factory=list)
    chronic_conditions: List[str] = field(default_factory=list)
    blood_type: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    def __post_init__(self):
        self.allergens = normalize_tags(self.allergens)
        self.chronic_conditions = normalize_tags(self.chronic_conditions)

    @property
    def age(self) -> int:
        """생년월일과 오늘 사이의 만 나이(연 단위)."""
        return DateTimeUtils.calculate_age_years(self.birth_date)

    @property
    def age_months(self) -> int:
        """월 단위 나이. 한 살 미만 반려동물의 나이 표시에 사용합니다."""
        return DateTimeUtils.calculate_age_months(self.birth_date)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """
        요청 데이터(딕셔너리)로부터 Pet 인스턴스를 생성합니다.
        문자열로 전달된 Enum 값과 날짜 값을 자동으로 변환합니다.
        """
        processed_data = data.copy()

        gender_value = processed_data.get('gender')
        if isinstance(gender_value, str):
            try:
                processed_data['gender'] = PetGender(gender_value.lower())
            except ValueError:
                logging.warning(f"Invalid PetGender value '{gender_value}' for pet {processed_data.get('pet_id')}. Defaulting to UNKNOWN.")
                processed_data['gender'] = PetGender.UNKNOWN

        species_value = processed_data.get('species')
        if isinstance(species_value, str):
            try:
                processed_data['species'] = Species(species_value.lower())
            except ValueError:
                logging.warning(f"Invalid Species value '{species_value}' for pet {processed_data.get('pet_id')}. Defaulting to OTHER.")
                processed_data['species'] = Species.OTHER
        elif species_value is None:
            processed_data.pop('species', None)

        birth_date = processed_data.get('birth_date')
        if isinstance(birth_date, (str, datetime)):
            processed_data['birth_date'] = DateTimeUtils.validate_date_field(birth_date, 'birth_date')

        for list_field in ('allergens', 'chronic_conditions'):
            if processed_data.get(list_field) is None:
                processed_data[list_field] = []

        if processed_data.get('created_at') is None:
            processed_data.pop('created_at', None)

        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        """Pet 객체를 직렬화 가능한 딕셔너리로 변환합니다. 계산된 age를 포함합니다."""
        pet_dict = asdict(self)
        pet_dict['gender'] = self.gender.value
        pet_dict['species'] = self.species.value
        pet_dict['age'] = self.age
        pet_dict['age_months'] = self.age_months
        return pet_dict

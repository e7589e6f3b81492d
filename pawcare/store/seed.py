# pawcare/store/seed.py
"""
저장소 생성과 최초 실행용 샘플 데이터.
실제 백엔드가 없으므로, 앱 시작 시 아래 데이터로 저장소를 채워 첫 화면을 구성합니다.
"""

import copy
from dataclasses import dataclass
from datetime import timedelta
from dateutil.relativedelta import relativedelta

from pawcare.models.pet import Pet, PetGender, Species
from pawcare.models.health_record import HealthRecord, RecordType, Severity
from pawcare.models.weight_record import WeightRecord
from pawcare.models.illness import Illness, PREDEFINED_ILLNESSES
from pawcare.models.user import User
from pawcare.store.entity_store import EntityStore
from pawcare.utils.datetime_utils import DateTimeUtils

DEMO_USER_ID = "user1"
DEMO_USER_EMAIL = "demo@example.com"
SAMPLE_PET_ID = "cat1"


@dataclass
class Stores:
    """앱 전체에서 공유하는 저장소 묶음. create_app이 한 번 생성하여 서비스에 주입합니다."""
    pets: EntityStore[Pet]
    health_records: EntityStore[HealthRecord]
    weight_records: EntityStore[WeightRecord]
    custom_illnesses: EntityStore[Illness]
    users: EntityStore[User]

    def all(self):
        return [self.pets, self.health_records, self.weight_records, self.custom_illnesses, self.users]


def create_stores() -> Stores:
    return Stores(
        pets=EntityStore('pets', id_field='pet_id'),
        health_records=EntityStore('health_records', id_field='record_id'),
        weight_records=EntityStore('weight_records', id_field='record_id',
                                   sort_key=lambda r: r.date, descending=True),
        custom_illnesses=EntityStore('custom_illnesses', id_field='illness_id'),
        users=EntityStore('users', id_field='user_id'),
    )


def sample_user() -> User:
    return User(user_id=DEMO_USER_ID, email=DEMO_USER_EMAIL, full_name="John Smith")


def sample_pet() -> Pet:
    return Pet(
        pet_id=SAMPLE_PET_ID,
        owner_id=DEMO_USER_ID,
        name="Whiskers",
        species=Species.CAT,
        breed="Maine Coon",
        birth_date=DateTimeUtils.years_ago(3),
        gender=PetGender.FEMALE,
        is_neutered=True,
        blood_type="A",
        allergens=["Chicken", "Dairy"],
        image_url="https://images.unsplash.com/photo-1514888286974-6c03e2ca1dba",
    )


def sample_weight_records():
    """최근 9개월간 매월 1회 측정한 체중 (가장 최근 5.2kg, 한 달 전마다 0.1kg씩 무거움)."""
    now = DateTimeUtils.now().replace(hour=9, minute=0, second=0, microsecond=0)
    return [
        WeightRecord(record_id=f"wr{i + 1}", pet_id=SAMPLE_PET_ID,
                     weight=round(5.2 + 0.1 * i, 1), date=now - relativedelta(months=i))
        for i in range(9)
    ]


def sample_health_records():
    now = DateTimeUtils.now()
    return [
        HealthRecord(record_id="hr1", pet_id=SAMPLE_PET_ID, title="Rabies vaccination",
                     record_type=RecordType.VACCINATION, timestamp=now - relativedelta(months=2),
                     veterinarian="Dr. Sarah Lee", reminder_date=now + relativedelta(months=10)),
        HealthRecord(record_id="hr2", pet_id=SAMPLE_PET_ID, title="FVRCP booster",
                     record_type=RecordType.VACCINATION, timestamp=now - relativedelta(months=11),
                     veterinarian="Dr. Sarah Lee", reminder_date=now + relativedelta(months=1)),
        HealthRecord(record_id="hr3", pet_id=SAMPLE_PET_ID, title="Annual check-up",
                     record_type=RecordType.VET_VISIT, timestamp=now - timedelta(days=20),
                     veterinarian="Dr. Sarah Lee", notes="Healthy overall. Watch weight."),
        HealthRecord(record_id="hr4", pet_id=SAMPLE_PET_ID, title="Deworming tablet",
                     record_type=RecordType.MEDICATION, timestamp=now - timedelta(days=5)),
        HealthRecord(record_id="hr5", pet_id=SAMPLE_PET_ID, title="Vomited after breakfast",
                     record_type=RecordType.SYMPTOM, severity=Severity.MILD, illness_id="2",
                     description="Hairball suspected", timestamp=now - timedelta(days=2)),
    ]


def load_sample_data(stores: Stores) -> None:
    """각 저장소를 샘플 데이터로 초기화합니다. 사용자 정의 질병은 비어 있는 상태로 시작합니다."""
    stores.users.reset([sample_user()])
    stores.pets.reset([sample_pet()])
    stores.weight_records.reset(sample_weight_records())
    stores.health_records.reset(sample_health_records())
    stores.custom_illnesses.reset([])


def predefined_illnesses():
    """내장 질병 카탈로그의 깊은 복사본 (호출자가 수정해도 원본이 바뀌지 않도록)."""
    return copy.deepcopy(PREDEFINED_ILLNESSES)

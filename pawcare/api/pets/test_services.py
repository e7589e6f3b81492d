# pawcare/api/pets/test_services.py
import asyncio
from datetime import timedelta

import pytest

from pawcare.api.pets.services import PetService
from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.models.health_record import HealthRecord
from pawcare.models.pet import Pet, PetGender
from pawcare.models.weight_record import WeightRecord
from pawcare.store.seed import create_stores, load_sample_data, DEMO_USER_ID, SAMPLE_PET_ID
from pawcare.utils.datetime_utils import DateTimeUtils


@pytest.fixture
def stores():
    stores = create_stores()
    load_sample_data(stores)
    return stores


@pytest.fixture
def service(stores):
    return PetService(stores.pets, stores.health_records, stores.weight_records)


def make_pet(pet_id="pet-milo", name="Milo", years=1):
    return Pet(pet_id=pet_id, name=name, breed="Siamese", owner_id=DEMO_USER_ID,
               birth_date=DateTimeUtils.years_ago(years), gender=PetGender.MALE)


def test_add_pet_born_exactly_one_year_ago(service):
    asyncio.run(service.add_pet(make_pet()))
    stored = service.get_pet("pet-milo")
    assert stored.age == 1
    assert [p.pet_id for p in service.get_all_pets()] == [SAMPLE_PET_ID, "pet-milo"]

def test_add_pet_rejects_blank_name(service, stores):
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_pet(make_pet(name="   ")))
    assert len(stores.pets) == 1

def test_add_pet_trims_name(service):
    stored = asyncio.run(service.add_pet(make_pet(name="  Milo  ")))
    assert stored.name == "Milo"

def test_add_pet_rejects_zero_age(service):
    pet = make_pet()
    pet.birth_date = DateTimeUtils.today() - timedelta(days=30)
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_pet(pet))

def test_add_pet_rejects_duplicate_id(service):
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_pet(make_pet(pet_id=SAMPLE_PET_ID)))

def test_update_missing_pet_raises_not_found(service, stores):
    with pytest.raises(NotFoundError):
        asyncio.run(service.update_pet(make_pet(pet_id="ghost")))
    assert not stores.pets.exists("ghost")

def test_update_pet_replaces_in_place(service):
    asyncio.run(service.add_pet(make_pet()))
    whiskers = service.get_pet(SAMPLE_PET_ID)
    whiskers.name = "Whiskers II"
    asyncio.run(service.update_pet(whiskers))
    assert [p.name for p in service.get_all_pets()] == ["Whiskers II", "Milo"]

def test_delete_pet_cascades_only_its_records(service, stores):
    asyncio.run(service.add_pet(make_pet()))
    now = DateTimeUtils.now()
    stores.health_records.insert(HealthRecord(record_id="milo-hr", pet_id="pet-milo", title="Sneeze", timestamp=now))
    stores.weight_records.insert(WeightRecord(record_id="milo-wr", pet_id="pet-milo", weight=4.0, date=now))

    result = asyncio.run(service.delete_pet(SAMPLE_PET_ID))

    assert result == {'deleted_health_records': 5, 'deleted_weight_records': 9}
    assert not stores.pets.exists(SAMPLE_PET_ID)
    assert [r.record_id for r in stores.health_records.all()] == ["milo-hr"]
    assert [r.record_id for r in stores.weight_records.all()] == ["milo-wr"]

def test_delete_missing_pet_raises_not_found(service):
    with pytest.raises(NotFoundError):
        asyncio.run(service.delete_pet("ghost"))

def test_get_pet_for_owner_checks_ownership(service):
    assert service.get_pet_for_owner(SAMPLE_PET_ID, DEMO_USER_ID).name == "Whiskers"
    with pytest.raises(PermissionError):
        service.get_pet_for_owner(SAMPLE_PET_ID, "someone-else")
    with pytest.raises(NotFoundError):
        service.get_pet_for_owner("ghost", DEMO_USER_ID)

def test_pet_tags_are_normalized():
    pet = Pet(pet_id="p", name="Milo", breed="Siamese", birth_date=DateTimeUtils.years_ago(2),
              gender=PetGender.MALE, allergens=[" Chicken", "chicken", "", "Fish "])
    assert pet.allergens == ["Chicken", "Fish"]

def test_rejected_add_leaves_pet_untouched(service):
    duplicate = make_pet(pet_id=SAMPLE_PET_ID, name="  Milo  ")
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_pet(duplicate))
    assert duplicate.name == "  Milo  "

# pawcare/api/weight_records/test_services.py
import asyncio
from datetime import datetime, timezone

import pytest

from pawcare.api.weight_records.services import WeightRecordService
from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.models.weight_record import WeightRecord
from pawcare.store.seed import create_stores


@pytest.fixture
def service():
    return WeightRecordService(create_stores().weight_records)


def weight(record_id, value, day, pet_id="cat1"):
    return WeightRecord(record_id=record_id, pet_id=pet_id, weight=value,
                        date=datetime(2024, 1, day, tzinfo=timezone.utc))


def test_store_stays_sorted_newest_first(service):
    for r in [weight("a", 5.0, 10), weight("b", 5.2, 20), weight("c", 5.1, 15)]:
        asyncio.run(service.add_weight_record(r))
    assert [r.record_id for r in service.records.all()] == ["b", "c", "a"]

def test_update_moves_record_to_new_date_position(service):
    for r in [weight("a", 5.0, 10), weight("b", 5.2, 20)]:
        asyncio.run(service.add_weight_record(r))
    asyncio.run(service.update_weight_record(weight("a", 5.0, 25)))
    assert [r.record_id for r in service.weight_records_for_pet("cat1")] == ["a", "b"]

def test_weight_records_for_pet_filters_by_pet(service):
    asyncio.run(service.add_weight_record(weight("a", 5.0, 10)))
    asyncio.run(service.add_weight_record(weight("d", 9.0, 11, pet_id="dog1")))
    assert [r.record_id for r in service.weight_records_for_pet("cat1")] == ["a"]

@pytest.mark.parametrize("value", [0.4, 15.1])
def test_out_of_range_weight_is_rejected(service, value):
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_weight_record(weight("a", value, 10)))
    assert len(service.records) == 0

@pytest.mark.parametrize("value", [0.5, 15.0])
def test_range_bounds_are_inclusive(service, value):
    asyncio.run(service.add_weight_record(weight("a", value, 10)))
    assert service.get_record("a").weight == value

def test_delete_weight_record(service):
    asyncio.run(service.add_weight_record(weight("a", 5.0, 10)))
    asyncio.run(service.delete_weight_record("a"))
    assert service.get_record("a") is None
    with pytest.raises(NotFoundError):
        asyncio.run(service.delete_weight_record("a"))

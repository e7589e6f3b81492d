# pawcare/api/summary/test_services.py
from datetime import datetime, timedelta, timezone

import pytest

from pawcare.api.health_records.services import HealthRecordService
from pawcare.api.summary.services import SummaryService
from pawcare.api.weight_records.services import WeightRecordService
from pawcare.models.health_record import HealthRecord, RecordType, Severity
from pawcare.models.summary import TimeRange
from pawcare.models.weight_record import WeightRecord
from pawcare.store.seed import create_stores, load_sample_data, SAMPLE_PET_ID

NOW = datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def stores():
    return create_stores()


@pytest.fixture
def summary(stores):
    return SummaryService(HealthRecordService(stores.health_records),
                          WeightRecordService(stores.weight_records))


def test_latest_weight_and_delta(stores, summary):
    stores.weight_records.insert(WeightRecord(record_id="w1", pet_id="cat1", weight=5.2, date=NOW - timedelta(days=30)))
    stores.weight_records.insert(WeightRecord(record_id="w2", pet_id="cat1", weight=5.0, date=NOW))

    assert summary.latest_weight("cat1").weight == 5.0
    assert summary.weight_delta("cat1") == -0.2

def test_weight_metrics_without_enough_records(stores, summary):
    assert summary.latest_weight("cat1") is None
    assert summary.weight_delta("cat1") is None

    stores.weight_records.insert(WeightRecord(record_id="w1", pet_id="cat1", weight=5.2, date=NOW))
    assert summary.weight_delta("cat1") is None

def test_next_vaccination_due_is_earliest_reminder(stores, summary):
    stores.health_records.reset([
        HealthRecord(record_id="v1", pet_id="cat1", title="Rabies", record_type=RecordType.VACCINATION,
                     timestamp=NOW, reminder_date=NOW + timedelta(days=300)),
        HealthRecord(record_id="v2", pet_id="cat1", title="FVRCP", record_type=RecordType.VACCINATION,
                     timestamp=NOW, reminder_date=NOW + timedelta(days=30)),
        HealthRecord(record_id="v3", pet_id="cat1", title="No reminder", record_type=RecordType.VACCINATION,
                     timestamp=NOW),
        HealthRecord(record_id="m1", pet_id="cat1", title="Pill", record_type=RecordType.MEDICATION,
                     timestamp=NOW, reminder_date=NOW + timedelta(days=1)),
    ])
    assert summary.next_vaccination_due("cat1") == NOW + timedelta(days=30)

def test_next_vaccination_due_keeps_overdue_reminders(stores, summary):
    stores.health_records.insert(
        HealthRecord(record_id="v1", pet_id="cat1", title="Rabies", record_type=RecordType.VACCINATION,
                     timestamp=NOW - timedelta(days=400), reminder_date=NOW - timedelta(days=35)))
    assert summary.next_vaccination_due("cat1") == NOW - timedelta(days=35)

def test_next_vaccination_due_without_vaccinations(summary):
    assert summary.next_vaccination_due("cat1") is None

def test_weekly_health_summary_counts(stores, summary):
    stores.health_records.reset([
        HealthRecord(record_id="a", pet_id="cat1", title="a", timestamp=NOW - timedelta(days=1),
                     record_type=RecordType.SYMPTOM, severity=Severity.SEVERE),
        HealthRecord(record_id="b", pet_id="cat1", title="b", timestamp=NOW - timedelta(days=6),
                     record_type=RecordType.MEDICATION),
        HealthRecord(record_id="c", pet_id="cat1", title="c", timestamp=NOW - timedelta(days=8)),
        HealthRecord(record_id="d", pet_id="dog1", title="d", timestamp=NOW),
    ])
    result = summary.health_summary("cat1", TimeRange.WEEKLY, now=NOW)

    assert result.total_records == 2
    assert result.by_record_type == {"symptom": 1, "medication": 1}
    assert result.by_severity == {"severe": 1, "mild": 1}
    assert result.to_dict()['days'] == 7

def test_time_range_days():
    assert [t.days for t in TimeRange] == [7, 30, 90, 365]

def test_pet_overview_on_sample_data(stores, summary):
    load_sample_data(stores)
    overview = summary.pet_overview(SAMPLE_PET_ID, TimeRange.MONTHLY)

    assert overview['latest_weight']['weight'] == pytest.approx(5.2)
    assert overview["weight_delta"] == -0.1
    assert overview['next_vaccination_due'] == stores.health_records.get("hr2").reminder_date
    # 최근 30일: 진료(20일 전), 투약(5일 전), 증상(2일 전)
    assert overview['health_summary']['total_records'] == 3

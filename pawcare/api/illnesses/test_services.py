# pawcare/api/illnesses/test_services.py
import asyncio

import pytest

from pawcare.api.illnesses.services import IllnessService
from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.models.illness import Illness, IllnessCategory
from pawcare.presentation import illness_icon
from pawcare.store.entity_store import EntityStore
from pawcare.store.seed import predefined_illnesses


@pytest.fixture
def service():
    return IllnessService(EntityStore('custom_illnesses', id_field='illness_id'),
                          predefined=predefined_illnesses())


def ear_mites(illness_id="custom-1", name="Ear mites"):
    return Illness(illness_id=illness_id, name=name, category=IllnessCategory.EAR)


def test_predefined_catalog(service):
    assert [i.illness_id for i in service.get_all()] == ["1", "2", "3", "4", "5", "6"]
    assert all(i.is_predefined for i in service.predefined_illnesses())

def test_custom_illness_follows_predefined(service):
    asyncio.run(service.add_custom(ear_mites()))
    names = [i.name for i in service.get_all()]
    assert len(names) == 7
    assert names[-1] == "Ear mites"
    assert [i.name for i in service.illnesses_by_category(IllnessCategory.EAR)] == ["Ear Infection", "Ear mites"]

def test_add_custom_forces_non_predefined(service):
    illness = ear_mites()
    illness.is_predefined = True
    created = asyncio.run(service.add_custom(illness))
    assert created.is_predefined is False

def test_add_custom_rejects_blank_name_and_taken_ids(service):
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_custom(ear_mites(name="  ")))
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_custom(ear_mites(illness_id="1")))
    assert service.custom_illnesses() == []

def test_predefined_illness_cannot_be_deleted_or_updated(service):
    with pytest.raises(NotFoundError):
        asyncio.run(service.delete_custom("1"))
    with pytest.raises(NotFoundError):
        asyncio.run(service.update_custom(ear_mites(illness_id="1")))
    assert service.get_illness("1").name == "Upper Respiratory Infection"

def test_update_and_delete_custom(service):
    asyncio.run(service.add_custom(ear_mites()))
    asyncio.run(service.update_custom(ear_mites(name="Ear mites (severe)")))
    assert service.get_illness("custom-1").name == "Ear mites (severe)"

    asyncio.run(service.delete_custom("custom-1"))
    assert service.get_illness("custom-1") is None

def test_predefined_catalog_is_copied_per_service():
    first = IllnessService(EntityStore('a', id_field='illness_id'), predefined=predefined_illnesses())
    first.predefined_illnesses()[0].name = "Changed"
    second = IllnessService(EntityStore('b', id_field='illness_id'), predefined=predefined_illnesses())
    assert second.get_illness("1").name == "Upper Respiratory Infection"

def test_icon_falls_back_to_category_icon():
    assert illness_icon(ear_mites()) == "ear.fill"
    custom = ear_mites()
    custom.icon = "bandage"
    assert illness_icon(custom) == "bandage"

def test_rejected_add_leaves_illness_untouched(service):
    illness = ear_mites(illness_id="1", name="  Ear mites  ")
    illness.is_predefined = True
    with pytest.raises(DataValidationError):
        asyncio.run(service.add_custom(illness))
    assert illness.name == "  Ear mites  "
    assert illness.is_predefined is True

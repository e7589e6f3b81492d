# pawcare/store/test_entity_store.py
from dataclasses import dataclass

import pytest

from pawcare.core.errors import DataValidationError, NotFoundError
from pawcare.store.entity_store import ChangeAction, EntityStore, StoreChange
from pawcare.store.seed import create_stores, load_sample_data, SAMPLE_PET_ID


@dataclass
class Item:
    item_id: str
    rank: int = 0


def make_store(**kwargs):
    return EntityStore('items', id_field='item_id', **kwargs)


def test_insert_preserves_order_and_rejects_duplicate_id():
    store = make_store()
    store.insert(Item('a'))
    store.insert(Item('b'))
    with pytest.raises(DataValidationError):
        store.insert(Item('a'))
    assert [i.item_id for i in store.all()] == ['a', 'b']

def test_replace_keeps_position():
    store = make_store()
    for item_id in 'abc':
        store.insert(Item(item_id))
    store.replace(Item('b', rank=9))
    assert [(i.item_id, i.rank) for i in store.all()] == [('a', 0), ('b', 9), ('c', 0)]

def test_replace_and_remove_missing_id_raise_not_found():
    store = make_store()
    with pytest.raises(NotFoundError):
        store.replace(Item('ghost'))
    with pytest.raises(NotFoundError):
        store.remove('ghost')

def test_all_returns_snapshot():
    store = make_store()
    store.insert(Item('a'))
    snapshot = store.all()
    snapshot.clear()
    assert len(store) == 1

def test_descending_sort_is_stable():
    store = make_store(sort_key=lambda i: i.rank, descending=True)
    store.insert(Item('low', 1))
    store.insert(Item('first-high', 5))
    store.insert(Item('second-high', 5))
    assert [i.item_id for i in store.all()] == ['first-high', 'second-high', 'low']

def test_remove_where_returns_removed_entities():
    store = make_store()
    for item_id, rank in [('a', 1), ('b', 2), ('c', 1)]:
        store.insert(Item(item_id, rank))
    removed = store.remove_where(lambda i: i.rank == 1)
    assert [i.item_id for i in removed] == ['a', 'c']
    assert [i.item_id for i in store.all()] == ['b']

def test_listeners_receive_change_events_until_unsubscribed():
    store = make_store()
    events = []
    unsubscribe = store.subscribe(events.append)

    store.insert(Item('a'))
    store.replace(Item('a', rank=2))
    store.remove('a')
    unsubscribe()
    store.insert(Item('b'))

    assert events == [
        StoreChange('items', ChangeAction.INSERTED, ('a',)),
        StoreChange('items', ChangeAction.UPDATED, ('a',)),
        StoreChange('items', ChangeAction.DELETED, ('a',)),
    ]

def test_failing_listener_does_not_abort_mutation():
    store = make_store()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(received.append)
    store.insert(Item('a'))

    assert store.exists('a')
    assert len(received) == 1

def test_failed_mutation_emits_nothing():
    store = make_store()
    store.insert(Item('a'))
    events = []
    store.subscribe(events.append)
    with pytest.raises(DataValidationError):
        store.insert(Item('a'))
    assert events == []

def test_reset_rejects_duplicate_ids():
    store = make_store()
    with pytest.raises(DataValidationError):
        store.reset([Item('a'), Item('a')])

def test_sample_data_weight_store_is_newest_first():
    stores = create_stores()
    load_sample_data(stores)
    weights = stores.weight_records.all()
    assert len(weights) == 9
    assert weights[0].weight == pytest.approx(5.2)
    assert all(a.date >= b.date for a, b in zip(weights, weights[1:]))
    assert stores.pets.get(SAMPLE_PET_ID).name == "Whiskers"
    assert stores.custom_illnesses.all() == []

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

from app.database import ProductStore
from app.models import Product


def make(pid, name="Lamp"):
    now = datetime.now()
    return Product(id=pid, name=name, price=1, created_at=now, updated_at=now)


def test_next_id_starts_at_one_and_increments():
    store = ProductStore()
    assert [store.next_id() for _ in range(3)] == ["1", "2", "3"]


def test_put_get_overwrite_and_remove():
    store = ProductStore()
    store.put("1", make("1"))
    store.put("1", make("1", name="Replaced"))
    assert store.get("1").name == "Replaced"
    assert len(store) == 1
    assert store.exists("1")

    assert store.remove("1") is True
    assert store.remove("1") is False
    assert store.get("1") is None
    assert not store.exists("1")


def test_values_is_a_snapshot():
    store = ProductStore()
    store.put("1", make("1"))
    snapshot = store.values()
    store.put("2", make("2"))
    assert [p.id for p in snapshot] == ["1"]
    assert sorted(p.id for p in store.values()) == ["1", "2"]


def test_clear_resets_counter():
    store = ProductStore()
    store.put(store.next_id(), make("1"))
    store.next_id()
    store.clear()
    assert len(store) == 0
    assert store.next_id() == "1"


def test_stores_have_independent_counters():
    a, b = ProductStore(), ProductStore()
    a.next_id()
    a.next_id()
    assert b.next_id() == "1"


def test_next_id_is_unique_across_threads():
    store = ProductStore()
    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(lambda _: store.next_id(), range(2000)))
    assert len(set(ids)) == 2000
    assert store.next_id() == "2001"


def test_replace_builds_from_existing_entry():
    store = ProductStore()
    store.put("1", make("1"))
    replaced = store.replace("1", lambda old: old.model_copy(update={"name": old.name + " v2"}))
    assert replaced.name == "Lamp v2"
    assert store.get("1") == replaced


def test_replace_absent_id_stores_nothing():
    store = ProductStore()
    calls = []
    assert store.replace("9", lambda old: calls.append(old) or make("9")) is None
    assert calls == []
    assert store.get("9") is None
    assert len(store) == 0


def test_batch_holds_off_other_writers():
    store = ProductStore()
    ids = []
    with store.batch():
        worker = threading.Thread(target=lambda: ids.append(store.next_id()))
        worker.start()
        worker.join(timeout=0.2)
        assert worker.is_alive()
        store.clear()
        assert store.next_id() == "1"
    worker.join(timeout=5)
    assert ids == ["2"]

"""
Task store under concurrent access.

Run with: pytest tests/test_store_concurrency.py
"""

import threading
from concurrent.futures import ThreadPoolExecutor


def test_concurrent_creates_get_unique_contiguous_ids(store):
    count = 200
    with ThreadPoolExecutor(max_workers=16) as pool:
        tasks = list(pool.map(lambda i: store.create(f"task {i}", "parallel"), range(count)))

    ids = [t.id for t in tasks]
    assert len(set(ids)) == count
    assert set(ids) == set(range(1, count + 1))
    assert len(store) == count


def test_creates_interleaved_with_deletes_never_reuse_ids(store):
    seen = []
    seen_lock = threading.Lock()

    def worker(i):
        task = store.create(f"task {i}", "x")
        with seen_lock:
            seen.append(task.id)
        if i % 2:
            store.delete(task.id)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(worker, range(100)))

    assert sorted(seen) == list(range(1, 101))
    assert store.create("next", "x").id == 101


def test_readers_never_observe_torn_updates(store):
    task = store.create("A", "A")
    stop = threading.Event()
    torn = []

    def writer():
        flip = False
        while not stop.is_set():
            value = "B" if flip else "A"
            store.update(task.id, value, value, flip)
            flip = not flip

    def reader():
        for _ in range(2000):
            snapshot = store.get(task.id)
            expected_completed = snapshot.title == "B"
            if snapshot.title != snapshot.description or snapshot.completed != expected_completed:
                torn.append(snapshot)
            for listed in store.list_all():
                if listed.title != listed.description:
                    torn.append(listed)

    writer_thread = threading.Thread(target=writer)
    writer_thread.start()
    try:
        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(lambda _: reader(), range(4)))
    finally:
        stop.set()
        writer_thread.join(timeout=5)

    assert torn == []

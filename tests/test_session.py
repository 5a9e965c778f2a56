from __future__ import annotations

from openai_assistant.core.session import ImageResultSet, SessionStore


def test_replace_swaps_whole_list() -> None:
    results = ImageResultSet()
    results.replace(["a", "b", "c"])
    results.replace(["d"])
    assert results.urls == ("d",)
    assert len(results) == 1


def test_session_store_isolates_sessions() -> None:
    store = SessionStore()
    one_id, one = store.create()
    two_id, two = store.create()
    one.replace(["a"])
    assert one_id != two_id
    assert store.get(one_id) is one
    assert store.get(two_id).urls == ()


def test_unknown_id_is_not_adopted() -> None:
    store = SessionStore()
    assert store.get("made-up-by-client") is None
    assert store.get(None) is None
    assert len(store) == 0


def test_store_is_bounded_lru() -> None:
    store = SessionStore(max_sessions=3)
    ids = [store.create()[0] for _ in range(3)]
    # touching the oldest keeps it alive; the next oldest is evicted instead
    assert store.get(ids[0]) is not None
    store.create()
    store.create()
    assert len(store) == 3
    assert store.get(ids[0]) is not None
    assert store.get(ids[1]) is None
    assert store.get(ids[2]) is None

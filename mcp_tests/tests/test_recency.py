from core.recency import RecencyIndex


def test_touch_inserts_new_keys_at_front():
    idx = RecencyIndex()

    idx.touch("a")
    idx.touch("b")
    idx.touch("c")

    assert idx.keys() == ["c", "b", "a"]
    assert len(idx) == 3
    assert "b" in idx


def test_touch_existing_key_moves_it_to_front_without_duplicating():
    idx = RecencyIndex()
    for k in ("a", "b", "c"):
        idx.touch(k)

    idx.touch("a")
    idx.touch("a")

    assert idx.keys() == ["a", "c", "b"]
    assert len(idx) == 3


def test_evict_oldest_returns_keys_in_lru_order():
    idx = RecencyIndex()
    for k in ("a", "b", "c"):
        idx.touch(k)
    idx.touch("a")

    assert idx.evict_oldest() == "b"
    assert idx.evict_oldest() == "c"
    assert idx.evict_oldest() == "a"
    assert idx.evict_oldest() is None
    assert len(idx) == 0


def test_remove_is_idempotent():
    idx = RecencyIndex()
    idx.touch("a")
    idx.touch("b")

    idx.remove("a")
    idx.remove("a")
    idx.remove("missing")

    assert idx.keys() == ["b"]
    assert "a" not in idx


def test_removed_key_can_be_touched_again():
    idx = RecencyIndex()
    idx.touch("a")
    idx.touch("b")
    idx.remove("a")

    idx.touch("a")

    assert idx.keys() == ["a", "b"]
    assert idx.evict_oldest() == "b"

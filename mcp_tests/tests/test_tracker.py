import gc
from dataclasses import dataclass

import pytest

import core.tracker as tracker_mod
from core.errors import ValidationError
from core.tracker import ObjectTracker


class Thing:
    pass


def test_track_and_get_info(monkeypatch):
    monkeypatch.setattr(tracker_mod.time, "time", lambda: 12.0)

    t = ObjectTracker()
    obj = Thing()
    t.track(obj, owner="alice", tags=["x"])

    assert t.get_info(obj) == {"created": 12_000.0, "owner": "alice", "tags": ["x"]}
    assert obj in t
    assert len(t) == 1


def test_get_info_returns_copy():
    t = ObjectTracker()
    obj = Thing()
    t.track(obj, n=1)

    info = t.get_info(obj)
    info["n"] = 2

    assert t.get_info(obj)["n"] == 1


def test_untracked_object_has_no_info():
    t = ObjectTracker()
    assert t.get_info(Thing()) is None
    assert t.get_info(42) is None
    assert t.untrack(Thing()) is False


def test_retrack_replaces_record():
    t = ObjectTracker()
    obj = Thing()
    t.track(obj, v=1)
    t.track(obj, w=2)

    info = t.get_info(obj)
    assert "v" not in info
    assert info["w"] == 2


def test_untrack():
    t = ObjectTracker()
    obj = Thing()
    t.track(obj)

    assert t.untrack(obj) is True
    assert obj not in t


def test_record_does_not_keep_object_alive():
    t = ObjectTracker()
    obj = Thing()
    t.track(obj, label="tmp")
    assert len(t) == 1

    del obj
    gc.collect()

    assert len(t) == 0


@pytest.mark.parametrize("value", [1, "s", (1, 2)])
def test_non_weakrefable_objects_rejected(value):
    t = ObjectTracker()
    with pytest.raises(ValidationError):
        t.track(value)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def test_equal_objects_keep_separate_records():
    t = ObjectTracker()
    a = Point(1, 2)
    b = Point(1, 2)
    assert a == b

    t.track(a, owner="a")

    assert t.get_info(b) is None
    assert b not in t
    assert t.untrack(b) is False
    assert t.get_info(a)["owner"] == "a"

    t.track(b, owner="b")
    assert t.get_info(a)["owner"] == "a"
    assert t.get_info(b)["owner"] == "b"
    assert len(t) == 2


def test_collected_object_record_is_dropped_from_table():
    t = ObjectTracker()
    obj = Thing()
    t.track(obj)

    del obj
    gc.collect()

    assert t._records == {}

"""Identity-keyed metadata side-table.

Standalone library utility; the MCP server does not expose it.

Records are keyed by object identity, never by equality: two distinct
objects that compare equal keep separate records. Each record holds only a
weak reference to its object, so tracking never keeps an object alive; the
record is dropped when the object is reclaimed.
"""

from __future__ import annotations

import threading
import time
import weakref
from typing import Any, Dict, Optional, Tuple

from core.errors import ValidationError


class ObjectTracker:
    def __init__(self) -> None:
        self._records: Dict[int, Tuple["weakref.ref[Any]", Dict[str, Any]]] = {}
        # Reentrant: a weakref callback can fire while this thread holds the lock
        self._lock = threading.RLock()

    def track(self, obj: Any, **metadata: Any) -> None:
        record = {"created": time.time() * 1000.0, **metadata}
        oid = id(obj)
        self_ref = weakref.ref(self)

        def _drop(ref: "weakref.ref[Any]") -> None:
            tracker = self_ref()
            if tracker is not None:
                tracker._discard(oid, ref)

        try:
            ref = weakref.ref(obj, _drop)
        except TypeError as e:
            raise ValidationError(f"Cannot track object of type {type(obj).__name__}") from e

        with self._lock:
            self._records[oid] = (ref, record)

    def _discard(self, oid: int, ref: "weakref.ref[Any]") -> None:
        with self._lock:
            entry = self._records.get(oid)
            # id() may already be reused by a newer tracked object
            if entry is not None and entry[0] is ref:
                del self._records[oid]

    def _lookup(self, obj: Any) -> Optional[Dict[str, Any]]:
        entry = self._records.get(id(obj))
        if entry is None or entry[0]() is not obj:
            return None
        return entry[1]

    def get_info(self, obj: Any) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._lookup(obj)
        return dict(record) if record is not None else None

    def untrack(self, obj: Any) -> bool:
        with self._lock:
            if self._lookup(obj) is None:
                return False
            del self._records[id(obj)]
            return True

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for ref, _ in self._records.values() if ref() is not None)

    def __contains__(self, obj: object) -> bool:
        return self.get_info(obj) is not None

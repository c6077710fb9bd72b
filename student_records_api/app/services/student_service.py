"""
Business logic for student records.

``StudentService`` keeps records in an in‑memory list, in creation
order, together with the counter used to assign ids.  Nothing is
persisted: the contents live as long as the service instance, which
is owned by the application created in ``main.create_app``.

Ids coming from the HTTP layer are text.  ``coerce_id`` turns them into
the integer type used for stored ids with the same rules a JavaScript
client applies when comparing text to a number: ``"1"``, ``"01"``,
``"1.0"`` and ``"0x1"`` all address record 1, while ``"1_0"``, non‑ASCII
digits and other text that is not a number address nothing.
"""

import copy
import logging
import math
import re
import threading
from typing import Any, Dict, List, Mapping, Optional

from ..core.errors import StudentNotFoundError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

_DECIMAL_ID = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_ID = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def coerce_id(value: Any) -> Optional[int]:
    """Parse ``value`` into a record id, or return ``None`` if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return 0
    if _PREFIXED_ID.fullmatch(text):
        return int(text, 0)
    if not _DECIMAL_ID.fullmatch(text):
        return None
    if text.lstrip("+-").isdigit():
        return int(text)
    number = float(text)
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return None


class StudentService:
    """In‑memory store of student records.

    All public methods hold a single lock for their whole duration, so
    the service can be shared between threads without two operations
    ever observing each other half done.  Records returned to callers
    are deep copies; changing them does not touch the store.
    """

    def __init__(self) -> None:
        self._students: List[Record] = []
        self._next_id = 1
        self._lock = threading.RLock()

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def list_students(self) -> List[Record]:
        """Return all records in creation order."""
        with self._lock:
            return copy.deepcopy(self._students)

    def create_student(self, data: Mapping[str, Any]) -> Record:
        """Store ``data`` as a new record and return it.

        Any schema is accepted.  An ``id`` supplied by the caller is
        replaced by the next id from the counter.
        """
        with self._lock:
            fields = {key: value for key, value in data.items() if key != "id"}
            student = {"id": self._next_id, **copy.deepcopy(fields)}
            self._next_id += 1
            self._students.append(student)
            logger.info("Created student %s", student["id"])
            return copy.deepcopy(student)

    def get_student(self, student_id: Any) -> Record:
        """Return the record addressed by ``student_id``.

        Raises ``StudentNotFoundError`` if there is none.
        """
        with self._lock:
            index = self._find_index(student_id)
            if index is None:
                raise StudentNotFoundError(student_id)
            return copy.deepcopy(self._students[index])

    def update_student(self, student_id: Any, data: Mapping[str, Any]) -> Record:
        """Merge ``data`` over the addressed record and return the result.

        Fields missing from ``data`` keep their values and the record
        keeps its position.  The ``id`` field cannot be changed.
        """
        with self._lock:
            index = self._find_index(student_id)
            if index is None:
                raise StudentNotFoundError(student_id)
            changes = {key: value for key, value in data.items() if key != "id"}
            if "id" in data:
                logger.warning("Ignoring id in update body for student %s", self._students[index]["id"])
            merged = {**self._students[index], **copy.deepcopy(changes)}
            self._students[index] = merged
            logger.info("Updated student %s", merged["id"])
            return copy.deepcopy(merged)

    def delete_student(self, student_id: Any) -> int:
        """Remove the addressed record.

        A missing record is not an error.  Returns how many records
        were removed.
        """
        with self._lock:
            target = coerce_id(student_id)
            before = len(self._students)
            if target is not None:
                self._students = [s for s in self._students if s["id"] != target]
            removed = before - len(self._students)
            if removed:
                logger.info("Deleted student %s", target)
            return removed

    def _find_index(self, student_id: Any) -> Optional[int]:
        target = coerce_id(student_id)
        if target is None:
            return None
        for index, student in enumerate(self._students):
            if student["id"] == target:
                return index
        return None

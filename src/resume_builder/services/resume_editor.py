"""Resume editing service.

Section-scoped mutations over an immutable :class:`ResumeRecord`, the events
the editor dispatches, and the store that owns the current record.

Every operation returns a new record; the mutated section becomes a new tuple
and untouched sections are shared with the previous record.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from resume_builder.models.resume import (
    SCALAR_FIELDS,
    EntryIndexError,
    ResumeEntry,
    ResumeRecord,
    UnknownFieldError,
    get_section,
)

logger = logging.getLogger(__name__)

__all__ = [
    "EntryAdded",
    "EntryChanged",
    "EntryRemoved",
    "FieldChanged",
    "ResumeEvent",
    "ResumeStore",
    "add_entry",
    "reduce",
    "remove_entry",
    "update_entry",
    "update_field",
]


def _check_index(record: ResumeRecord, section: str, index: int) -> None:
    size = len(getattr(record, section))
    if not 0 <= index < size:
        raise EntryIndexError(f"Index {index} out of range for {section!r} with {size} entries")


def update_field(record: ResumeRecord, field_name: str, value: str) -> ResumeRecord:
    """Set a scalar field such as ``full_name`` or ``skills``."""
    if field_name not in SCALAR_FIELDS:
        raise UnknownFieldError(f"Unknown resume field {field_name!r}")
    return record.model_copy(update={field_name: value})


def update_entry(
    record: ResumeRecord,
    section: str,
    index: int,
    field_name: str,
    value: str,
) -> ResumeRecord:
    """Set one field of the entry at *index* in *section*.

    Raises:
        UnknownSectionError: If *section* is not a repeated section.
        UnknownFieldError: If the entry schema has no *field_name*.
        EntryIndexError: If *index* is out of range.
    """
    spec = get_section(section)
    if field_name not in spec.field_names:
        raise UnknownFieldError(f"Unknown field {field_name!r} for section {section!r}")
    _check_index(record, section, index)

    entries = list(getattr(record, section))
    entries[index] = entries[index].model_copy(update={field_name: value})
    return record.model_copy(update={section: tuple(entries)})


def add_entry(
    record: ResumeRecord,
    section: str,
    template: ResumeEntry | None = None,
) -> ResumeRecord:
    """Append *template* (a blank entry by default) to *section*."""
    spec = get_section(section)
    entry = template if template is not None else spec.blank_entry()
    if not isinstance(entry, spec.entry_type):
        raise TypeError(
            f"{section!r} expects {spec.entry_type.__name__}, got {type(entry).__name__}"
        )
    return record.model_copy(update={section: (*getattr(record, section), entry)})


def remove_entry(record: ResumeRecord, section: str, index: int) -> ResumeRecord:
    """Remove the entry at *index*; later entries shift down by one.

    Removing the last remaining entry leaves the section empty.
    """
    get_section(section)
    _check_index(record, section, index)
    entries = getattr(record, section)
    return record.model_copy(update={section: entries[:index] + entries[index + 1 :]})


# ---------------------------------------------------------------------------
# Events and reducer


@dataclass(frozen=True, slots=True)
class FieldChanged:
    field_name: str
    value: str


@dataclass(frozen=True, slots=True)
class EntryChanged:
    section: str
    index: int
    field_name: str
    value: str


@dataclass(frozen=True, slots=True)
class EntryAdded:
    section: str
    template: ResumeEntry | None = None


@dataclass(frozen=True, slots=True)
class EntryRemoved:
    section: str
    index: int


ResumeEvent = FieldChanged | EntryChanged | EntryAdded | EntryRemoved


def reduce(record: ResumeRecord, event: ResumeEvent) -> ResumeRecord:
    """Apply *event* to *record* and return the resulting record."""
    if isinstance(event, FieldChanged):
        return update_field(record, event.field_name, event.value)
    if isinstance(event, EntryChanged):
        return update_entry(record, event.section, event.index, event.field_name, event.value)
    if isinstance(event, EntryAdded):
        return add_entry(record, event.section, event.template)
    if isinstance(event, EntryRemoved):
        return remove_entry(record, event.section, event.index)
    raise TypeError(f"Unsupported resume event: {event!r}")


class ResumeStore:
    """Owns the current record and notifies subscribers when it is replaced."""

    def __init__(self, record: ResumeRecord | None = None) -> None:
        self._record = record if record is not None else ResumeRecord()
        self._listeners: list[Callable[[ResumeRecord], None]] = []

    @property
    def record(self) -> ResumeRecord:
        return self._record

    def subscribe(self, listener: Callable[[ResumeRecord], None]) -> Callable[[], None]:
        """Register *listener* and return a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def dispatch(self, event: ResumeEvent) -> ResumeRecord:
        """Reduce *event* into the current record and notify subscribers."""
        updated = reduce(self._record, event)
        if updated is self._record:
            return updated
        self._record = updated
        logger.debug("Applied %s", type(event).__name__)
        for listener in list(self._listeners):
            listener(updated)
        return updated

    def replace(self, record: ResumeRecord) -> None:
        """Swap in a whole record, e.g. one loaded from JSON."""
        self._record = record
        for listener in list(self._listeners):
            listener(record)

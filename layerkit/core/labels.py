"""Generic helpers for objects that carry a user-visible label."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from layerkit.config.constants import UNIQUEFIER_SEPARATOR
from layerkit.core.number_format import NumberFormat, plain_number_format


@runtime_checkable
class LabeledObject(Protocol):
    """Anything exposing a read/write ``label``."""

    @property
    def label(self) -> str: ...

    @label.setter
    def label(self, value: str) -> None: ...


def uniquefier_appendix(number: int, number_format: NumberFormat | None = None) -> str:
    """Return the suffix for uniquefier *number*; zero (or less) means none."""
    if number <= 0:
        return ""
    fmt = number_format or plain_number_format
    return f"{UNIQUEFIER_SEPARATOR}{fmt(number)}"


def _label_taken(label: str, labels: list[str], label_to_exclude: str | None) -> bool:
    skipped = False
    for existing in labels:
        if not skipped and label_to_exclude is not None and existing == label_to_exclude:
            skipped = True
            continue
        if existing == label:
            return True
    return False


def get_unique_label(
    objects: Iterable[LabeledObject],
    candidate: str,
    label_to_exclude: str | None = None,
    uniquefier_number: int = 0,
    number_format: NumberFormat | None = None,
) -> str:
    """Return *candidate*, adorned with the lowest free uniquefier if needed.

    Numbering starts at *uniquefier_number*; ``0`` tries the bare candidate
    first.  The object currently labelled *label_to_exclude* is ignored once,
    so an object can keep its own label when renamed.
    """
    labels = [obj.label for obj in objects]
    number = uniquefier_number
    while True:
        label = candidate + uniquefier_appendix(number, number_format)
        if not _label_taken(label, labels, label_to_exclude):
            return label
        number += 1


def get_new_label_default(
    objects: Iterable[LabeledObject],
    base: str,
    separator: str = UNIQUEFIER_SEPARATOR,
    zero_based: bool = True,
    start_number: int | None = None,
) -> str:
    """Return ``"{base}{separator}{n}"`` for the first free *n*.

    *n* starts at *start_number*, or by default at the object count (plus one
    unless *zero_based*), since the new object has not been added yet.
    """
    labels = [obj.label for obj in objects]
    if start_number is not None:
        number = start_number
    else:
        number = len(labels) if zero_based else len(labels) + 1
    while True:
        label = f"{base}{separator}{number}"
        if label not in labels:
            return label
        number += 1

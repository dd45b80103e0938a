"""Layer data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from PyQt6.QtGui import QColor

from layerkit.config.constants import (
    DEFAULT_LAYER_NAME,
    LAYER_COLOR_DEFAULT,
    LAYER_DISPLAY_DEFAULT,
    LAYER_LOCK_DEFAULT,
    LAYER_NAME_DEFAULT,
    LAYER_STATUS_DEFAULT,
)


class LayerRecord(Protocol):
    """Fields every layer record exposes to the manager."""

    name: str
    color: QColor
    active: bool
    visible: bool
    locked: bool
    label: str

    def clone(self, name: str) -> LayerRecord: ...

    def notify_name(self) -> None: ...


@runtime_checkable
class LayerAssignable(Protocol):
    """An object that is drawn on, and can be moved to, a layer."""

    @property
    def layer(self) -> LayerRecord: ...

    @layer.setter
    def layer(self, value: LayerRecord) -> None: ...


def compare_layers(first: LayerRecord, second: LayerRecord) -> int:
    """Three-way comparison by name, with the Default Layer always first."""
    if first.name == DEFAULT_LAYER_NAME:
        return -1
    if second.name == DEFAULT_LAYER_NAME:
        return 1
    if first.name < second.name:
        return -1
    if first.name > second.name:
        return 1
    return 0


@dataclass(eq=False)
class Layer:
    """Plain layer record: a named, coloured group of drawable objects.

    Equality is identity; two layers with the same fields are still two
    layers.  Ordering follows :func:`compare_layers`.
    """

    name: str = LAYER_NAME_DEFAULT
    color: QColor = field(default_factory=lambda: QColor(LAYER_COLOR_DEFAULT))
    active: bool = LAYER_STATUS_DEFAULT
    visible: bool = LAYER_DISPLAY_DEFAULT
    locked: bool = LAYER_LOCK_DEFAULT

    @property
    def hidden(self) -> bool:
        return not self.visible

    @property
    def label(self) -> str:
        return self.name

    @label.setter
    def label(self, value: str) -> None:
        self.name = value

    def __lt__(self, other: LayerRecord) -> bool:
        return compare_layers(self, other) < 0

    def notify_name(self) -> None:
        """Plain layers have no listeners, so there is nothing to publish."""

    def clone(self, name: str) -> Layer:
        """Return an inactive copy named *name* with this layer's look and lock."""
        return Layer(
            name=name,
            color=QColor(self.color),
            active=LAYER_STATUS_DEFAULT,
            visible=self.visible,
            locked=self.locked,
        )

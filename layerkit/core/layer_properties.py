"""LayerProperties — observable layer record for binding to views."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtGui import QColor

from layerkit.config.constants import (
    LAYER_COLOR_DEFAULT,
    LAYER_DISPLAY_DEFAULT,
    LAYER_LOCK_DEFAULT,
    LAYER_NAME_DEFAULT,
    LAYER_STATUS_DEFAULT,
)
from layerkit.core.layer import Layer, LayerRecord, compare_layers


class LayerProperties(QObject):
    """Layer record whose fields publish a signal whenever their value changes.

    Writing a value equal to the current one is silent, like any property
    binding.

    Signals
    -------
    name_changed(str, str)
        Emitted with the old and new name.
    color_changed(QColor)
    active_changed(bool)
    visible_changed(bool)
    locked_changed(bool)
    changed(str)
        Emitted after any of the above with the field name.
    """

    name_changed = pyqtSignal(str, str)
    color_changed = pyqtSignal(QColor)
    active_changed = pyqtSignal(bool)
    visible_changed = pyqtSignal(bool)
    locked_changed = pyqtSignal(bool)
    changed = pyqtSignal(str)

    def __init__(
        self,
        name: str = LAYER_NAME_DEFAULT,
        color: QColor | str | None = None,
        active: bool = LAYER_STATUS_DEFAULT,
        visible: bool = LAYER_DISPLAY_DEFAULT,
        locked: bool = LAYER_LOCK_DEFAULT,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._name = name
        self._color = QColor(color if color is not None else LAYER_COLOR_DEFAULT)
        self._active = active
        self._visible = visible
        self._locked = locked

    @classmethod
    def from_layer(cls, layer: Layer, parent: QObject | None = None) -> LayerProperties:
        return cls(layer.name, layer.color, layer.active, layer.visible, layer.locked, parent)

    def to_layer(self) -> Layer:
        """Return a plain, unobserved snapshot of this record."""
        return Layer(
            name=self._name,
            color=QColor(self._color),
            active=self._active,
            visible=self._visible,
            locked=self._locked,
        )

    # --- fields ---

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        old = self._name
        if value != old:
            self._name = value
            self.name_changed.emit(old, value)
            self.changed.emit("name")

    def notify_name(self) -> None:
        """Publish the current name as changed even though it is not.

        Views that refresh on ``name_changed`` need this when an edit is
        undone by uniquefication and ends on the value it started from.
        """
        self.name_changed.emit(self._name, self._name)
        self.changed.emit("name")

    @property
    def color(self) -> QColor:
        return QColor(self._color)

    @color.setter
    def color(self, value: QColor) -> None:
        if value != self._color:
            self._color = QColor(value)
            self.color_changed.emit(QColor(value))
            self.changed.emit("color")

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        if value != self._active:
            self._active = value
            self.active_changed.emit(value)
            self.changed.emit("active")

    @property
    def visible(self) -> bool:
        return self._visible

    @visible.setter
    def visible(self, value: bool) -> None:
        if value != self._visible:
            self._visible = value
            self.visible_changed.emit(value)
            self.changed.emit("visible")

    @property
    def locked(self) -> bool:
        return self._locked

    @locked.setter
    def locked(self, value: bool) -> None:
        if value != self._locked:
            self._locked = value
            self.locked_changed.emit(value)
            self.changed.emit("locked")

    @property
    def hidden(self) -> bool:
        return not self._visible

    # --- labeled object ---

    @property
    def label(self) -> str:
        return self.name

    @label.setter
    def label(self, value: str) -> None:
        self.name = value

    def __lt__(self, other: LayerRecord) -> bool:
        return compare_layers(self, other) < 0

    def __repr__(self) -> str:
        return (
            f"LayerProperties(name={self._name!r}, color={self._color.name()!r}, "
            f"active={self._active}, visible={self._visible}, locked={self._locked})"
        )

    def clone(self, name: str) -> LayerProperties:
        """Return an inactive copy named *name* with this layer's look and lock."""
        return LayerProperties(
            name=name,
            color=self._color,
            active=LAYER_STATUS_DEFAULT,
            visible=self._visible,
            locked=self._locked,
        )

"""LayerCollection — observable ordered sequence of layer records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from PyQt6.QtCore import QObject, pyqtSignal

from layerkit.core.layer import LayerRecord
from layerkit.core.layer_properties import LayerProperties


class LayerCollection(QObject):
    """Ordered list of layers that reports structural and per-field changes.

    Index 0 is reserved for the Default Layer.  Field edits on member
    :class:`LayerProperties` are relayed as ``layer_changed``; plain
    :class:`~layerkit.core.layer.Layer` members are stored but not observed.

    Signals
    -------
    layer_inserted(int, object)
        Emitted with the index and the inserted layer.
    layer_removed(int, object)
        Emitted with the former index and the removed layer.
    collection_reset()
        Emitted after :meth:`clear` or :meth:`set_all`.
    layer_changed(int, str)
        Emitted with the member's index and the changed field name.
    """

    layer_inserted = pyqtSignal(int, object)
    layer_removed = pyqtSignal(int, object)
    collection_reset = pyqtSignal()
    layer_changed = pyqtSignal(int, str)

    def __init__(
        self, layers: Iterable[LayerRecord] = (), parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._layers: list[LayerRecord] = []
        self._relays: dict[int, Callable[[str], None]] = {}
        for layer in layers:
            self._layers.append(layer)
            self._watch(layer)

    # --- sequence protocol ---

    def __len__(self) -> int:
        return len(self._layers)

    def __getitem__(self, index: int) -> LayerRecord:
        return self._layers[index]

    def __setitem__(self, index: int, layer: LayerRecord) -> None:
        index = self._normalise(index)
        self.pop(index)
        self.insert(index, layer)

    def __delitem__(self, index: int) -> None:
        self.pop(index)

    def __iter__(self) -> Iterator[LayerRecord]:
        return iter(list(self._layers))

    def __contains__(self, layer: object) -> bool:
        return self._find(layer) >= 0

    def __repr__(self) -> str:
        return f"LayerCollection({self._layers!r})"

    @property
    def layers(self) -> list[LayerRecord]:
        """Return a copy of the layer list."""
        return list(self._layers)

    def index(self, layer: LayerRecord) -> int:
        idx = self._find(layer)
        if idx < 0:
            raise ValueError(f"{layer!r} is not in the collection")
        return idx

    # --- mutations ---

    def append(self, layer: LayerRecord) -> None:
        self.insert(len(self._layers), layer)

    def extend(self, layers: Iterable[LayerRecord]) -> None:
        for layer in layers:
            self.append(layer)

    def insert(self, index: int, layer: LayerRecord) -> None:
        size = len(self._layers)
        if index < 0:
            index = max(0, size + index)
        index = min(index, size)
        self._layers.insert(index, layer)
        self._watch(layer)
        self.layer_inserted.emit(index, layer)

    def pop(self, index: int = -1) -> LayerRecord:
        index = self._normalise(index)
        layer = self._layers.pop(index)
        self._unwatch(layer)
        self.layer_removed.emit(index, layer)
        return layer

    def remove(self, layer: LayerRecord) -> None:
        self.pop(self.index(layer))

    def clear(self) -> None:
        self._replace([])

    def set_all(self, layers: Iterable[LayerRecord]) -> None:
        """Replace the whole content, announcing a single reset."""
        self._replace(list(layers))

    # --- internal ---

    def _normalise(self, index: int) -> int:
        size = len(self._layers)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("layer index out of range")
        return index

    def _find(self, layer: object) -> int:
        for i, existing in enumerate(self._layers):
            if existing is layer:
                return i
        return -1

    def _replace(self, layers: list[LayerRecord]) -> None:
        old = self._layers
        self._layers = layers
        for layer in old:
            self._unwatch(layer)
        for layer in layers:
            self._watch(layer)
        self.collection_reset.emit()

    def _watch(self, layer: LayerRecord) -> None:
        if not isinstance(layer, LayerProperties) or id(layer) in self._relays:
            return

        def relay(field: str) -> None:
            idx = self._find(layer)
            if idx >= 0:
                self.layer_changed.emit(idx, field)

        self._relays[id(layer)] = relay
        layer.changed.connect(relay)

    def _unwatch(self, layer: LayerRecord) -> None:
        if self._find(layer) >= 0:
            return
        relay = self._relays.pop(id(layer), None)
        if relay is not None and isinstance(layer, LayerProperties):
            layer.changed.disconnect(relay)

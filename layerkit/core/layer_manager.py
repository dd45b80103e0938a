"""Layer collection policies: naming, activation, visibility and cloning.

Every function works on a caller-owned collection (a ``list`` or a
:class:`~layerkit.core.layer_collection.LayerCollection`) and keeps no state
between calls.  The layer at :data:`DEFAULT_LAYER_INDEX` is the Default
Layer; when no layer is flagged active, read queries treat it as active.

Expected edge cases (``None`` candidates, bad indices, unknown names, empty
collections) never raise; they fall back to a safe value instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import cmp_to_key

from PyQt6.QtGui import QColor

from layerkit.config.constants import (
    DEFAULT_LAYER_INDEX,
    DEFAULT_LAYER_NAME,
    LAYER_COLOR_DEFAULT,
    LAYER_DISPLAY_DEFAULT,
    LAYER_LOCK_DEFAULT,
    LAYER_NAME_DEFAULT,
    LAYER_STATUS_DEFAULT,
    TEMP_LAYER_NAME,
    VARIOUS_LAYER_NAME,
)
from layerkit.core.labels import get_new_label_default, get_unique_label, uniquefier_appendix
from layerkit.core.layer import Layer, LayerAssignable, LayerRecord, compare_layers
from layerkit.core.layer_collection import LayerCollection
from layerkit.core.layer_properties import LayerProperties
from layerkit.core.number_format import NumberFormat

log = logging.getLogger(__name__)

LayerList = list[LayerRecord] | LayerCollection
LayerType = type[Layer] | type[LayerProperties]


def _is_blank(name: str | None) -> bool:
    return name is None or not name.strip()


def _make_layer(layer_type: LayerType, name: str, active: bool) -> LayerRecord:
    return layer_type(
        name=name,
        color=QColor(LAYER_COLOR_DEFAULT),
        active=active,
        visible=LAYER_DISPLAY_DEFAULT,
        locked=LAYER_LOCK_DEFAULT,
    )


def _layer_type_for(collection: LayerList | None) -> LayerType:
    return LayerProperties if isinstance(collection, LayerCollection) else Layer


def _apply_name(layer: LayerRecord, candidate: str, new_name: str) -> None:
    old_name = layer.name
    if new_name != old_name:
        layer.name = new_name
        return
    layer.name = candidate
    layer.name = new_name
    if candidate == old_name:
        # Neither write changed the value.
        layer.notify_name()


def _resolve_index(collection: LayerList, target: int | str) -> int:
    if isinstance(target, str):
        return get_layer_index(collection, target)
    return target


# --- ordering ---


def sort_layers(collection: Iterable[LayerRecord]) -> list[LayerRecord]:
    """Return the layers sorted by name, Default Layer first."""
    return sorted(collection, key=cmp_to_key(compare_layers))


# --- naming ---


def get_unique_layer_name(
    candidate: str | None,
    collection: LayerList,
    number_format: NumberFormat | None = None,
    exclude_index: int = -1,
    uniquefier_number: int = 0,
) -> str:
    """Return *candidate* adorned with the lowest uniquefier that avoids a clash.

    Numbering starts at *uniquefier_number*; ``0`` tries the bare candidate
    first.  The layer at *exclude_index* is ignored so a layer being renamed
    does not collide with itself.  Every retry rescans from the start of the
    collection so names freed elsewhere are reused.
    """
    if _is_blank(candidate):
        candidate = LAYER_NAME_DEFAULT
    number = uniquefier_number
    while True:
        name = candidate + uniquefier_appendix(number, number_format)
        if is_layer_name_unique(name, collection, exclude_index):
            return name
        number += 1


def get_next_available_layer_name(
    collection: LayerList,
    base_name: str = LAYER_NAME_DEFAULT,
    start_number: int | None = None,
) -> str:
    """Return ``"{base_name} {n}"`` for the first free *n*.

    *n* starts at the collection size by default: the new layer has not been
    inserted yet and numbering starts at the Default Layer's 0.
    """
    return get_new_label_default(collection, base_name, start_number=start_number)


def is_layer_name_unique(candidate: str, collection: LayerList, exclude_index: int = -1) -> bool:
    for i, layer in enumerate(collection):
        if i != exclude_index and layer.name == candidate:
            return False
    return True


def uniquefy_layer_name(
    collection: LayerList,
    layer_index: int,
    candidate: str,
    number_format: NumberFormat | None = None,
) -> str | None:
    """Rename the layer at *layer_index* to a unique form of *candidate*.

    The Default Layer keeps its reserved name.  When the outcome equals the
    current name (a cancelled or clashing edit), the raw candidate is written
    first so that listeners still see a change before the final value lands.
    If even the candidate equals the current name, the layer publishes its
    name explicitly through ``notify_name``.
    Returns the applied name, or ``None`` for an invalid index.
    """
    layer = get_layer(collection, layer_index)
    if layer is None:
        log.debug("Ignoring rename of missing layer index %d", layer_index)
        return None
    if layer_index == DEFAULT_LAYER_INDEX:
        new_name = DEFAULT_LAYER_NAME
    else:
        new_name = get_unique_layer_name(
            candidate, collection, number_format, exclude_index=layer_index
        )
    _apply_name(layer, candidate, new_name)
    return new_name


def uniquefy_layer_label(
    collection: LayerList,
    candidate: str,
    label_to_exclude: str,
    number_format: NumberFormat | None = None,
) -> str:
    """Rename the layer currently labelled *label_to_exclude*.

    Same rules as :func:`uniquefy_layer_name`; an unknown label renames the
    Default Layer, which keeps its reserved name.
    """
    layer = get_layer_by_name(collection, label_to_exclude)
    if layer.name == DEFAULT_LAYER_NAME:
        new_name = DEFAULT_LAYER_NAME
    else:
        base = LAYER_NAME_DEFAULT if _is_blank(candidate) else candidate
        new_name = get_unique_label(
            collection, base, label_to_exclude, number_format=number_format
        )
    _apply_name(layer, candidate, new_name)
    return new_name


# --- insertion ---


def add_layer(
    collection: LayerList,
    candidate: LayerRecord | None,
    number_format: NumberFormat | None = None,
    name_default: str = LAYER_NAME_DEFAULT,
) -> None:
    """Append *candidate* after making its name unique.

    A blank name becomes *name_default* with a uniquefier, even the first
    time ("Layer 1" rather than "Layer").  Other names stay unadorned when
    they are already unique.
    """
    if candidate is None:
        return
    if _is_blank(candidate.name):
        name = get_unique_layer_name(name_default, collection, number_format, uniquefier_number=1)
    else:
        name = get_unique_layer_name(candidate.name, collection, number_format)
    candidate.name = name
    collection.append(candidate)


def add_layer_if_unique(collection: LayerList, candidate: LayerRecord) -> None:
    """Append *candidate* unless a layer with its name is already present."""
    if not has_layer(collection, candidate):
        collection.append(candidate)


def add_layer_clone(collection: LayerList, insert_index: int) -> LayerRecord | None:
    """Clone the layer before *insert_index* and insert the clone there."""
    if len(collection) == 0:
        return None
    layer = get_layer_clone(collection, insert_index - 1)
    if layer is None:
        log.debug("No layer to clone before index %d", insert_index)
        return None
    collection.insert(insert_index, layer)
    return layer


def get_layer_clone(
    collection: LayerList, reference: int | LayerRecord | None
) -> LayerRecord | None:
    """Return an unattached, inactive copy of *reference* with a fresh name."""
    if isinstance(reference, int):
        reference = get_layer(collection, reference)
    if reference is None:
        return None
    return reference.clone(get_next_available_layer_name(collection))


def import_layer(collection: LayerList, candidate: LayerRecord | None) -> LayerRecord | None:
    """Make sure *candidate* can be assigned to an object, adding it if new.

    Returns the candidate itself, or the Default Layer for ``None``.
    """
    if candidate is None:
        return get_default_layer(collection)
    add_layer_if_unique(collection, candidate)
    return candidate


# --- active and hidden policies ---


def enforce_active_layer_policy(
    collection: LayerList, target: int | str, exempt_default_layer: bool = False
) -> LayerRecord | None:
    """Make *target* (an index or a name) the one and only active layer.

    Hidden layers cannot become active: the target's flag is cleared instead
    and the current active layer is returned.  With *exempt_default_layer*
    the Default Layer is activated even while hidden, so that some layer is
    always active.
    """
    index = _resolve_index(collection, target)
    if not is_layer_index_valid(collection, index):
        log.debug("Cannot activate missing layer %r", target)
        return get_active_layer(collection)

    if not exempt_default_layer or index != DEFAULT_LAYER_INDEX:
        if is_layer_hidden(collection, index):
            layer = collection[index]
            if layer.active:
                layer.active = False
            return get_active_layer(collection)

    # Set the new active layer before clearing the rest so that there is
    # never a moment without one.
    active = set_active_layer(collection, index)
    for i, layer in enumerate(collection):
        if i != index and layer.active:
            layer.active = False
    return active


def enforce_hidden_layer_policy(collection: LayerList, target: int | str, visible: bool) -> None:
    """Apply *visible* to *target*; hiding the active layer activates the Default Layer."""
    index = _resolve_index(collection, target)
    layer = get_layer(collection, index)
    if layer is None:
        log.debug("Cannot change visibility of missing layer %r", target)
        return
    if layer.visible != visible:
        layer.visible = visible

    if index != DEFAULT_LAYER_INDEX and not visible:
        if get_active_layer_index(collection) == index:
            enforce_active_layer_policy(collection, DEFAULT_LAYER_INDEX, exempt_default_layer=True)


def set_active_layer(collection: LayerList, target: int | str) -> LayerRecord | None:
    """Flag *target* active without touching any other layer."""
    if isinstance(target, str):
        layer = get_active_layer(collection, target)
    else:
        layer = get_layer(collection, target)
    if layer is not None and not layer.active:
        layer.active = True
    return layer


def set_default_layer_active(collection: LayerList) -> LayerRecord | None:
    return set_active_layer(collection, DEFAULT_LAYER_INDEX)


# --- queries ---


def get_active_layer(collection: LayerList, name: str | None = None) -> LayerRecord | None:
    """Return the first active layer, or the Default Layer if none is.

    With *name*, return that layer instead (same fallback as
    :func:`get_layer_by_name`).
    """
    if name is not None:
        return get_layer_by_name(collection, name)
    for layer in collection:
        if layer.active:
            return layer
    return get_default_layer(collection)


def get_active_layer_index(collection: LayerList) -> int:
    layer = get_active_layer(collection)
    if layer is None:
        return -1
    return get_layer_index(collection, layer)


def get_active_layer_name(collection: LayerList) -> str | None:
    layer = get_active_layer(collection)
    return None if layer is None else layer.name


def get_default_layer(collection: LayerList) -> LayerRecord | None:
    return get_layer(collection, DEFAULT_LAYER_INDEX)


def get_layer(collection: LayerList | None, index: int) -> LayerRecord | None:
    if not is_layer_index_valid(collection, index):
        return None
    return collection[index]


def get_layer_by_name(
    collection: LayerList | None, name: str | LayerRecord | None
) -> LayerRecord:
    """Return the layer called *name*, falling back to the Default Layer.

    *name* may also be a layer from another collection, matched by name.
    Without a usable collection a freshly made Default Layer is returned.
    """
    if name is not None and not isinstance(name, str):
        name = name.name
    if collection is not None and not _is_blank(name):
        for layer in collection:
            if layer.name == name:
                return layer
    default = None if collection is None else get_default_layer(collection)
    if default is None:
        log.debug("No Default Layer available; making a detached one")
        return make_default_layer(_layer_type_for(collection))
    return default


def get_layer_index(collection: LayerList, layer: LayerRecord | str) -> int:
    """Return the position of *layer*, or -1 if it is not in *collection*.

    A name is first resolved through :func:`get_layer_by_name`, so an unknown
    name yields the Default Layer's index.
    """
    if isinstance(layer, str):
        layer = get_layer_by_name(collection, layer)
    for i, existing in enumerate(collection):
        if existing is layer:
            return i
    return -1


def get_assignable_layer_names(collection: LayerList, support_multi_edit: bool = False) -> list[str]:
    """Return the distinct names of visible layers, in collection order.

    With *support_multi_edit* the list starts with the "various" entry used
    for heterogeneous selections.
    """
    names: list[str] = []
    if support_multi_edit:
        names.append(VARIOUS_LAYER_NAME)
    for layer in collection:
        if layer.visible and not _is_blank(layer.name) and layer.name not in names:
            names.append(layer.name)
    return names


def has_active_layer(collection: LayerList) -> bool:
    return any(layer.active for layer in collection)


def has_layer(collection: LayerList, reference: LayerRecord) -> bool:
    return any(layer.name == reference.name for layer in collection)


def is_layer_hidden(collection: LayerList, index: int) -> bool:
    layer = get_layer(collection, index)
    return layer is not None and not layer.visible


def is_layer_index_valid(collection: LayerList | None, index: int) -> bool:
    return collection is not None and 0 <= index < len(collection)


# --- factories ---


def make_default_layer(layer_type: LayerType = Layer) -> LayerRecord:
    return _make_layer(layer_type, DEFAULT_LAYER_NAME, active=True)


def make_temp_layer(layer_type: LayerType = Layer) -> LayerRecord:
    """Return the scratch layer used by clipboard-style operations."""
    return _make_layer(layer_type, TEMP_LAYER_NAME, active=False)


def make_layer_default(layer_type: LayerType = Layer) -> LayerRecord:
    return _make_layer(layer_type, LAYER_NAME_DEFAULT, active=LAYER_STATUS_DEFAULT)


def reset_layer_collection(collection: LayerList, layer_type: LayerType | None = None) -> None:
    """Empty *collection* and seed it with a single, active Default Layer."""
    if layer_type is None:
        layer_type = _layer_type_for(collection)
    default = make_default_layer(layer_type)
    if isinstance(collection, LayerCollection):
        collection.set_all([default])
    else:
        collection.clear()
        collection.append(default)


def make_layer_collection(observable: bool = True) -> LayerList:
    """Return a new collection holding only the Default Layer.

    The observable form is a :class:`LayerCollection` of
    :class:`LayerProperties`; otherwise a plain list of :class:`Layer`.
    """
    collection: LayerList = LayerCollection() if observable else []
    reset_layer_collection(collection)
    return collection


# --- deletion ---


def reassign_object_on_deleted_layer(
    obj: LayerAssignable, collection: LayerList, fallback_active_layer: LayerRecord
) -> bool:
    """Move *obj* to *fallback_active_layer* if its layer is gone.

    Call after every layer deletion for each object that may have been on
    the deleted layer.  Returns whether *obj* was reassigned.
    """
    if has_layer(collection, obj.layer):
        return False
    obj.layer = fallback_active_layer
    return True


def reassign_objects_on_deleted_layer(
    objects: Iterable[LayerAssignable], collection: LayerList, fallback_active_layer: LayerRecord
) -> int:
    """Apply :func:`reassign_object_on_deleted_layer` to *objects*; return the count moved."""
    moved = 0
    for obj in objects:
        if reassign_object_on_deleted_layer(obj, collection, fallback_active_layer):
            moved += 1
    if moved:
        log.debug("Reassigned %d object(s) to layer %r", moved, fallback_active_layer.name)
    return moved

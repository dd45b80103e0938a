"""Shared pytest fixtures."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from pytestqt.qtbot import QtBot

from layerkit.core.layer import Layer
from layerkit.core.layer_collection import LayerCollection
from layerkit.core.layer_manager import make_layer_collection


@pytest.fixture()
def layers() -> list[Layer]:
    """A plain collection: the Default Layer plus "Layer 1" and "Layer 2"."""
    collection = make_layer_collection(observable=False)
    collection.append(Layer(name="Layer 1"))
    collection.append(Layer(name="Layer 2"))
    return collection


@pytest.fixture()
def observable_layers(qtbot: QtBot) -> LayerCollection:
    """An observable collection holding only the Default Layer."""
    collection = make_layer_collection()
    assert isinstance(collection, LayerCollection)
    return collection

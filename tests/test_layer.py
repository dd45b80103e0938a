"""Tests for the plain Layer record and layer ordering."""

from PyQt6.QtGui import QColor

from layerkit.config.constants import DEFAULT_LAYER_NAME, LAYER_NAME_DEFAULT
from layerkit.core.labels import LabeledObject
from layerkit.core.layer import Layer, compare_layers
from layerkit.core.layer_manager import sort_layers


def test_layer_defaults() -> None:
    layer = Layer()
    assert layer.name == LAYER_NAME_DEFAULT
    assert layer.color == QColor("#000000")
    assert layer.active is False
    assert layer.visible is True
    assert layer.locked is False
    assert layer.hidden is False


def test_label_aliases_name() -> None:
    layer = Layer(name="Walls")
    assert isinstance(layer, LabeledObject)
    assert layer.label == "Walls"
    layer.label = "Doors"
    assert layer.name == "Doors"


def test_equality_is_identity() -> None:
    a = Layer(name="Same")
    b = Layer(name="Same")
    assert a != b
    assert [a, b].index(b) == 1


def test_layer_clone() -> None:
    layer = Layer(name="Original", color=QColor("red"), active=True, visible=False, locked=True)
    clone = layer.clone("Layer 3")
    assert clone is not layer
    assert clone.name == "Layer 3"
    assert clone.color == QColor("red")
    assert clone.active is False
    assert clone.visible is False
    assert clone.locked is True


def test_clone_color_is_independent() -> None:
    layer = Layer(color=QColor("red"))
    clone = layer.clone("Copy")
    clone.color.setRed(0)
    assert layer.color == QColor("red")


def test_compare_orders_by_name() -> None:
    assert compare_layers(Layer(name="A"), Layer(name="B")) == -1
    assert compare_layers(Layer(name="B"), Layer(name="A")) == 1
    assert compare_layers(Layer(name="A"), Layer(name="A")) == 0


def test_compare_is_case_sensitive() -> None:
    assert compare_layers(Layer(name="Z"), Layer(name="a")) == -1


def test_default_layer_compares_first() -> None:
    default = Layer(name=DEFAULT_LAYER_NAME)
    early = Layer(name="AAA")
    assert compare_layers(default, early) == -1
    assert compare_layers(early, default) == 1
    assert default < early
    assert not early < default


def test_sorted_puts_default_layer_first() -> None:
    names = ["Roof", "Layer 2", DEFAULT_LAYER_NAME, "!pinned", "Attic"]
    layers = [Layer(name=n) for n in names]
    assert [layer.name for layer in sorted(layers)][0] == DEFAULT_LAYER_NAME
    ordered = [layer.name for layer in sort_layers(layers)]
    assert ordered == [DEFAULT_LAYER_NAME, "!pinned", "Attic", "Layer 2", "Roof"]

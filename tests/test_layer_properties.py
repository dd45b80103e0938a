"""Tests for the observable LayerProperties record."""

from __future__ import annotations

from PyQt6.QtGui import QColor
from pytestqt.qtbot import QtBot

from layerkit.core.layer import Layer
from layerkit.core.layer_properties import LayerProperties


def test_defaults(qtbot: QtBot) -> None:
    props = LayerProperties()
    assert props.name == "Layer"
    assert props.color == QColor("#000000")
    assert props.active is False
    assert props.visible is True
    assert props.locked is False


def test_name_change_emits_old_and_new(qtbot: QtBot) -> None:
    props = LayerProperties(name="Old")
    received: list[tuple[str, str]] = []
    props.name_changed.connect(lambda old, new: received.append((old, new)))
    props.name = "New"
    assert received == [("Old", "New")]


def test_equal_write_is_silent(qtbot: QtBot) -> None:
    props = LayerProperties(name="Same", visible=True)
    fields: list[str] = []
    props.changed.connect(fields.append)
    props.name = "Same"
    props.visible = True
    props.color = QColor("#000000")
    assert fields == []


def test_each_field_reports_change(qtbot: QtBot) -> None:
    props = LayerProperties()
    fields: list[str] = []
    props.changed.connect(fields.append)
    props.name = "Walls"
    props.color = QColor("blue")
    props.active = True
    props.visible = False
    props.locked = True
    assert fields == ["name", "color", "active", "visible", "locked"]


def test_visible_signal(qtbot: QtBot) -> None:
    props = LayerProperties()
    with qtbot.waitSignal(props.visible_changed, timeout=1000) as blocker:
        props.visible = False
    assert blocker.args == [False]
    assert props.hidden is True


def test_color_getter_returns_copy(qtbot: QtBot) -> None:
    props = LayerProperties(color="red")
    props.color.setBlue(255)
    assert props.color == QColor("red")


def test_label_aliases_name(qtbot: QtBot) -> None:
    props = LayerProperties(name="A")
    props.label = "B"
    assert props.name == "B"
    assert props.label == "B"


def test_round_trip_with_plain_layer(qtbot: QtBot) -> None:
    layer = Layer(name="Doors", color=QColor("green"), active=True, visible=False, locked=True)
    props = LayerProperties.from_layer(layer)
    snapshot = props.to_layer()
    assert isinstance(snapshot, Layer)
    assert (snapshot.name, snapshot.active, snapshot.visible, snapshot.locked) == (
        "Doors",
        True,
        False,
        True,
    )
    assert snapshot.color == QColor("green")


def test_clone_is_inactive_properties(qtbot: QtBot) -> None:
    props = LayerProperties(name="Src", color="red", active=True, visible=True, locked=True)
    clone = props.clone("Layer 4")
    assert isinstance(clone, LayerProperties)
    assert clone.name == "Layer 4"
    assert clone.active is False
    assert clone.locked is True
    assert clone.color == QColor("red")


def test_sorting_mixed_records(qtbot: QtBot) -> None:
    items = [LayerProperties(name="b"), Layer(name="Layer 0"), LayerProperties(name="a")]
    assert [item.name for item in sorted(items)] == ["Layer 0", "a", "b"]


def test_notify_name_publishes_unchanged_value(qtbot: QtBot) -> None:
    props = LayerProperties(name="Walls")
    fields: list[str] = []
    props.changed.connect(fields.append)
    with qtbot.waitSignal(props.name_changed, timeout=1000) as blocker:
        props.notify_name()
    assert blocker.args == ["Walls", "Walls"]
    assert fields == ["name"]

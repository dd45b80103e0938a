"""Tests for LayerSettings."""

from __future__ import annotations

from pathlib import Path

from layerkit.config.constants import LAYER_NAME_DEFAULT
from layerkit.config.settings import LayerSettings


def test_defaults(tmp_path: Path) -> None:
    settings = LayerSettings(tmp_path / "layers.ini")
    assert settings.layer_name_default() == LAYER_NAME_DEFAULT
    assert settings.group_digits() is False
    assert settings.locale_name() == ""
    assert settings.support_multi_edit() is False


def test_values_persist(tmp_path: Path) -> None:
    path = tmp_path / "layers.ini"
    settings = LayerSettings(path)
    settings.set_layer_name_default("Sheet")
    settings.set_group_digits(True)
    settings.set_locale_name("fr_FR")
    settings.set_support_multi_edit(True)
    settings.sync()

    reloaded = LayerSettings(path)
    assert reloaded.layer_name_default() == "Sheet"
    assert reloaded.group_digits() is True
    assert reloaded.locale_name() == "fr_FR"
    assert reloaded.support_multi_edit() is True


def test_blank_name_default_falls_back(tmp_path: Path) -> None:
    settings = LayerSettings(tmp_path / "layers.ini")
    settings.set_layer_name_default("   ")
    assert settings.layer_name_default() == LAYER_NAME_DEFAULT

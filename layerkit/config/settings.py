"""Persistent layer preferences backed by QSettings."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from layerkit.config.constants import APP_NAME, LAYER_NAME_DEFAULT, ORG_NAME


class LayerSettings:
    """Thin wrapper around QSettings for typed access to layer preferences.

    Pass *path* to read and write an INI file instead of the platform store.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        if path is None:
            self._qs = QSettings(ORG_NAME, APP_NAME)
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    def sync(self) -> None:
        self._qs.sync()

    # --- naming ---

    def layer_name_default(self) -> str:
        val = self._qs.value("layers/nameDefault", LAYER_NAME_DEFAULT, type=str)
        return val.strip() or LAYER_NAME_DEFAULT

    def set_layer_name_default(self, name: str) -> None:
        self._qs.setValue("layers/nameDefault", name)

    # --- uniquefier formatting ---

    def group_digits(self) -> bool:
        return self._qs.value("format/groupDigits", False, type=bool)

    def set_group_digits(self, enabled: bool) -> None:
        self._qs.setValue("format/groupDigits", enabled)

    def locale_name(self) -> str:
        """Return the locale used for uniquefier digits ("" means system)."""
        return self._qs.value("format/locale", "", type=str)

    def set_locale_name(self, name: str) -> None:
        self._qs.setValue("format/locale", name)

    # --- editing ---

    def support_multi_edit(self) -> bool:
        return self._qs.value("editing/multiEdit", False, type=bool)

    def set_support_multi_edit(self, enabled: bool) -> None:
        self._qs.setValue("editing/multiEdit", enabled)

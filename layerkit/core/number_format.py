"""Number-formatting strategies used to render uniquefier suffixes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from PyQt6.QtCore import QLocale

if TYPE_CHECKING:
    from layerkit.config.settings import LayerSettings

NumberFormat = Callable[[int], str]


def plain_number_format(number: int) -> str:
    """Format *number* with no grouping or locale-specific digits."""
    return str(number)


def locale_number_format(
    locale: QLocale | str | None = None, *, group_digits: bool = True
) -> NumberFormat:
    """Return a formatter rendering integers the way *locale* writes them.

    *locale* may be a :class:`QLocale`, a locale name such as ``"de_DE"`` or
    ``None`` for the system locale.  With *group_digits* off the group
    separator is omitted (``1234`` rather than ``1,234``).
    """
    if locale is None:
        loc = QLocale()
    else:
        loc = QLocale(locale)
    options = loc.numberOptions()
    if group_digits:
        options &= ~QLocale.NumberOption.OmitGroupSeparator
    else:
        options |= QLocale.NumberOption.OmitGroupSeparator
    loc.setNumberOptions(options)

    def _format(number: int) -> str:
        return loc.toString(number)

    return _format


def number_format_from_settings(settings: LayerSettings) -> NumberFormat:
    """Build the uniquefier formatter configured in *settings*."""
    name = settings.locale_name()
    return locale_number_format(name or None, group_digits=settings.group_digits())

# SPDX-License-Identifier: MIT

from contextvars import ContextVar

_show_header_var: ContextVar[bool] = ContextVar("show_header", default=True)

# Plain ASCII bars for terminals without block glyphs
_ascii_bars_var: ContextVar[bool] = ContextVar("ascii_bars", default=False)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    return _show_header_var.get()


def set_ascii_bars(value: bool) -> None:
    """Draw gantt bars with ASCII characters instead of block glyphs."""
    _ascii_bars_var.set(value)


def get_ascii_bars() -> bool:
    return _ascii_bars_var.get()

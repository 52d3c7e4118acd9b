"""State-label formatters: the bracketed tag leading a condition description."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from checkmark.conditions.base import EvalState

StateLabels = Callable[[EvalState], str]


class LabelStyle(str, Enum):
    SYMBOLS = "symbols"
    LEGACY = "legacy"


def symbol_labels(state: EvalState) -> str:
    if state is EvalState.NOT_EXECUTED:
        return "[ ] "
    if state is EvalState.MATCHED:
        return "[✓] "
    if state is EvalState.FAILED:
        return "[✗] "
    return "[?] "


def legacy_labels(state: EvalState) -> str:
    if state is EvalState.NOT_EXECUTED:
        return "[NOT EXECUTED] "
    if state is EvalState.MATCHED:
        return "[OK] "
    if state is EvalState.FAILED:
        return "[FAILED] "
    return "[UNKNOWN] "


_STYLES: dict[LabelStyle, StateLabels] = {
    LabelStyle.SYMBOLS: symbol_labels,
    LabelStyle.LEGACY: legacy_labels,
}


def state_labels_for(style: LabelStyle | str) -> StateLabels:
    """Return the label formatter registered for *style*.

    Raises ValueError for unknown style names.
    """
    return _STYLES[LabelStyle(style)]

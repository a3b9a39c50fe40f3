# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : colored_enum.py
#   file_relpath : src/prettymarkup/core/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enum members carrying a colorizer for terminal output.

`ColoredStrEnum` keeps the member ``value`` a plain string (hashing, equality
and ``repr`` behave as for any ``str`` enum) and stores a yachalk style next to
it, exposed as ``.color``.

Example:
    ```python
    from yachalk import chalk

    class Outcome(ColoredStrEnum):
        OK = ("ok", chalk.green)
        FAILED = ("failed", chalk.red_bright)

    Outcome.OK.color(Outcome.OK.value)  # green "ok"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable decorating text for display, compatible with `yachalk.ChalkBuilder`."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Return ``args`` joined by ``sep`` and decorated."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose value is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """The textual value of the member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """The colorizer associated with the member."""
        return self._color

    def render(self) -> str:
        """Return the member value decorated with its own color."""
        return self._color(self._value_)

"""Styled text segments that make up a prompt module."""

from __future__ import annotations

from dataclasses import dataclass, field

_RESET = "\x1b[0m"

_COLOR_CODES = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "purple": 5,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

Color = str | int | tuple[int, int, int] | None


def _color_code(color: Color, base: int) -> str | None:
    """Return the SGR parameters for a colour, using ``base`` (30 or 40)."""
    if color is None:
        return None
    if isinstance(color, str):
        try:
            return str(base + _COLOR_CODES[color.lower()])
        except KeyError:
            raise ValueError(f"unknown colour name: {color!r}") from None
    if isinstance(color, bool):
        raise ValueError(f"invalid colour: {color!r}")
    if isinstance(color, int):
        if not 0 <= color <= 255:
            raise ValueError(f"fixed colour out of range: {color}")
        return f"{base + 8};5;{color}"
    if isinstance(color, tuple) and len(color) == 3:
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            raise ValueError(f"RGB components out of range: {color!r}")
        r, g, b = color
        return f"{base + 8};2;{r};{g};{b}"
    raise ValueError(f"invalid colour: {color!r}")


@dataclass(frozen=True)
class Style:
    """Terminal text style: colours plus text effects."""

    foreground: Color = None
    background: Color = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    def __post_init__(self) -> None:
        _color_code(self.foreground, 30)
        _color_code(self.background, 40)

    def _codes(self) -> list[str]:
        effects = [
            (self.bold, "1"),
            (self.dimmed, "2"),
            (self.italic, "3"),
            (self.underline, "4"),
            (self.blink, "5"),
            (self.reverse, "7"),
            (self.hidden, "8"),
            (self.strikethrough, "9"),
        ]
        codes = [code for enabled, code in effects if enabled]
        for color, base in ((self.background, 40), (self.foreground, 30)):
            code = _color_code(color, base)
            if code is not None:
                codes.append(code)
        return codes

    @property
    def is_plain(self) -> bool:
        """True when the style changes nothing."""
        return not self._codes()

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the escape sequences for this style."""
        codes = self._codes()
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


@dataclass
class Segment:
    """A single configurable element of a module, holding a value and a style."""

    name: str
    value: str = ""
    style: Style | None = field(default=None)

    def ansi_string(self) -> str:
        """Return the value painted with the segment's style, if any."""
        if self.style is None:
            return self.value
        return self.style.paint(self.value)

    def is_empty(self) -> bool:
        """True when the value holds nothing but whitespace."""
        return not self.value.strip()

    def __str__(self) -> str:
        return self.ansi_string()
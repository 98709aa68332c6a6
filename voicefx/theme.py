"""Colour palette and colour helpers for the dark interface theme."""

from __future__ import annotations

from dataclasses import dataclass, replace


def _float_to_byte(value: float) -> int:
    if value <= 0.0:
        return 0
    if value >= 1.0:
        return 255
    return int(round(value * 255.0))


@dataclass(frozen=True)
class Colour:
    """An 8-bit ARGB colour."""

    alpha: int
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for component in (self.alpha, self.red, self.green, self.blue):
            if not 0 <= component <= 255:
                raise ValueError("colour components must lie between 0 and 255")

    @classmethod
    def from_argb(cls, value: int) -> Colour:
        """Build a colour from a 32-bit 0xAARRGGBB value."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError("ARGB value must fit in 32 bits")
        return cls((value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @property
    def argb(self) -> int:
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    def with_alpha(self, alpha: float) -> Colour:
        """Return this colour with an alpha given from 0.0 to 1.0."""
        return replace(self, alpha=_float_to_byte(alpha))

    def brighter(self, amount: float = 0.4) -> Colour:
        """Return a lighter colour; larger amounts move closer to white."""
        if amount < 0.0:
            raise ValueError("amount must not be negative")
        scale = 1.0 / (1.0 + amount)

        def lift(component: int) -> int:
            return int(255 - scale * (255 - component))

        return Colour(self.alpha, lift(self.red), lift(self.green), lift(self.blue))

    def to_hex(self) -> str:
        """Return the colour as eight uppercase hex digits, AARRGGBB."""
        return f"{self.argb:08X}"


BG_BASE = Colour.from_argb(0xFF242424)
BG_SURFACE = Colour.from_argb(0xFF1E1E1E)
BG_OVERLAY = Colour.from_argb(0xFF303030)
BG_CARD = Colour.from_argb(0xFF2D2D2D)
BORDER_SUBTLE = Colour.from_argb(0xFF404040)

TEXT_PRIMARY = Colour.from_argb(0xFFFFFFFF)
TEXT_SECONDARY = Colour.from_argb(0xFFA0A0A0)

ACCENT_PRIMARY = Colour.from_argb(0xFF3584E4)
ACCENT_SUCCESS = Colour.from_argb(0xFF2ED573)
ACCENT_DANGER = Colour.from_argb(0xFFE01B24)

TRANSPARENT = Colour.from_argb(0x00000000)
SLIDER_TRACK = Colour.from_argb(0xFF3A3A3A)
FIELD_BACKGROUND = Colour.from_argb(0xFF1A1A1A)
SCROLLBAR_THUMB = Colour.from_argb(0xFF555555)


def default_colour_scheme() -> dict[str, Colour]:
    """Return the widget colour assignments of the theme."""
    return {
        "ResizableWindow.background": BG_BASE,
        "Label.text": TEXT_PRIMARY,
        "Label.background": TRANSPARENT,
        "TextButton.button": BG_OVERLAY,
        "TextButton.buttonOn": ACCENT_PRIMARY,
        "TextButton.textOff": TEXT_PRIMARY,
        "TextButton.textOn": TEXT_PRIMARY,
        "ListBox.background": BG_SURFACE,
        "ListBox.text": TEXT_PRIMARY,
        "ListBox.outline": TRANSPARENT,
        "Slider.thumb": ACCENT_PRIMARY,
        "Slider.track": ACCENT_PRIMARY,
        "Slider.background": SLIDER_TRACK,
        "Slider.rotaryFill": ACCENT_PRIMARY,
        "Slider.rotaryOutline": BG_OVERLAY,
        "Slider.textBoxText": TEXT_PRIMARY,
        "Slider.textBoxBackground": FIELD_BACKGROUND,
        "Slider.textBoxOutline": BORDER_SUBTLE,
        "Slider.textBoxHighlight": ACCENT_PRIMARY.with_alpha(0.3),
        "ComboBox.background": FIELD_BACKGROUND,
        "ComboBox.text": TEXT_PRIMARY,
        "ComboBox.arrow": TEXT_SECONDARY,
        "ComboBox.outline": BORDER_SUBTLE,
        "PopupMenu.background": BG_CARD,
        "PopupMenu.text": TEXT_PRIMARY,
        "PopupMenu.highlightedBackground": ACCENT_PRIMARY,
        "PopupMenu.highlightedText": TEXT_PRIMARY,
        "ScrollBar.thumb": SCROLLBAR_THUMB,
        "ScrollBar.track": TRANSPARENT,
    }


def button_colour(base: Colour, highlighted: bool, down: bool) -> Colour:
    """Return the fill colour of a button in the given interaction state."""
    if down:
        return base.brighter(0.1)
    if highlighted:
        return base.brighter(0.05)
    return base
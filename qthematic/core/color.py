"""RGBA color value used by styles and overrides."""

from typing import NamedTuple, Sequence


def _check_channel(name: str, value) -> int:
    # bool is an int subclass; a True channel is always a caller bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Color channel {name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"Color channel {name} out of range [0, 255]: {value}")
    return value


class Color32(NamedTuple):
    """Four unsigned bytes, straight (unmultiplied) alpha."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_rgba_unmultiplied(cls, r: int, g: int, b: int, a: int) -> 'Color32':
        return cls(
            _check_channel("r", r),
            _check_channel("g", g),
            _check_channel("b", b),
            _check_channel("a", a),
        )

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color32':
        return cls.from_rgba_unmultiplied(r, g, b, 255)

    @classmethod
    def gray(cls, l: int) -> 'Color32':
        return cls.from_rgba_unmultiplied(l, l, l, 255)

    @classmethod
    def from_black_alpha(cls, a: int) -> 'Color32':
        return cls.from_rgba_unmultiplied(0, 0, 0, a)

    @classmethod
    def from_additive_luminance(cls, l: int) -> 'Color32':
        """Additive colors carry zero alpha so they brighten what is below."""
        return cls.from_rgba_unmultiplied(l, l, l, 0)

    @classmethod
    def from_array(cls, values: Sequence[int]) -> 'Color32':
        """Build from the ``[r, g, b, a]`` JSON form."""
        if isinstance(values, (str, bytes)) or len(values) != 4:
            raise ValueError(f"Expected 4 color channels, got {values!r}")
        return cls.from_rgba_unmultiplied(*values)

    def to_array(self) -> list[int]:
        return [self.r, self.g, self.b, self.a]

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def is_opaque(self) -> bool:
        return self.a == 255


TRANSPARENT = Color32(0, 0, 0, 0)
BLACK = Color32(0, 0, 0, 255)
WHITE = Color32(255, 255, 255, 255)

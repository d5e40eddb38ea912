"""In-memory pixel images and colour conversion for display depths."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Image:
    """A packed image of ``width`` x ``height`` pixels.

    Each pixel takes ``bpp // 8`` bytes; rows follow each other without
    padding. ``endian`` is 0 for little-endian pixels, 1 for big-endian.
    """

    width: int
    height: int
    endian: int = 0
    bpp: int = 32
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bpp <= 0 or self.bpp % 8:
            raise ValueError(f"unsupported bits per pixel: {self.bpp}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, not {self.endian}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def opp(self) -> int:
        """Bytes per pixel."""
        return self.bpp // 8

    @property
    def size_line(self) -> int:
        """Bytes per row."""
        return self.width * self.opp

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.opp

    def set_raw_pixel(self, x: int, row: int, color: int) -> None:
        """Store the low bytes of ``color`` at column ``x`` of ``row``."""
        start = self._offset(x, row)
        mask = (1 << (8 * self.opp)) - 1
        self.data[start:start + self.opp] = (color & mask).to_bytes(self.opp, self._byteorder)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)`` to ``color`` (0xAARRGGBB)."""
        self.set_raw_pixel(x, y, color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned value stored at ``(x, y)``."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.opp], self._byteorder)


def new_image(width: int, height: int) -> Image:
    """Create a zero-filled 32-bit image."""
    return Image(width, height)


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, not {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    rest = mask >> shift
    width = 0
    while rest & 1:
        rest >>= 1
        width += 1
    return shift, width


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red shift, red bits, green shift, green bits, blue shift, blue bits)."""
    return tuple(
        value
        for mask in (red_mask, green_mask, blue_mask)
        for value in _mask_shift(mask)
    )


def get_color_value(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a display of ``depth`` bits."""
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )
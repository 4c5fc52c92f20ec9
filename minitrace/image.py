"""An in-memory pixel buffer with the layout of a 32-bit ZPixmap image."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence, Union

TRUECOLOR_SHIFTS = (16, 8, 8, 8, 0, 8)
"""Channel shifts and widths (red, green, blue) of a 24-bit TrueColor visual."""


def get_color_value(color: int, depth: int, shifts: Sequence[int] = TRUECOLOR_SHIFTS) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of ``depth`` bits.

    ``shifts`` holds, for red, green and blue in turn, the position of the
    channel's lowest bit and the channel's width. Visuals of 24 bits or more
    take the colour as it is.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )


@dataclass
class Image:
    """A width x height image stored row by row.

    ``endian`` is 0 for little-endian pixel storage and 1 for big-endian.
    """

    width: int
    height: int
    bits_per_pixel: int = 32
    endian: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError(f"unsupported pixel size {self.bits_per_pixel}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        """Bytes taken by one pixel."""
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Bytes taken by one row."""
        return self.width * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at column ``x`` of row ``y``."""
        offset = self._offset(x, y)
        size = self.bytes_per_pixel
        value = color & ((1 << (8 * size)) - 1)
        self.data[offset:offset + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Pixel value stored at column ``x`` of row ``y``."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], self._byteorder)

    def to_ppm(self) -> bytes:
        """The image as a binary PPM (P6), reading pixels as 0x..RRGGBB."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for y in range(self.height):
            for x in range(self.width):
                pixel = self.get_pixel(x, y)
                body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
        return header + bytes(body)

    def save_ppm(self, path: Union[str, Path]) -> None:
        """Write the image to ``path`` as a binary PPM."""
        Path(path).write_bytes(self.to_ppm())
"""In-memory pixel images and colour conversion for display visuals."""

from __future__ import annotations

# Rows are padded to this many bits, as for a 32-bit bitmap pad.
_ROW_PAD_BITS = 32
# Extra columns allocated past the image width in the pixel buffer.
_EXTRA_COLUMNS = 32


def _trailing_run(mask: int, bit: int) -> tuple[int, int]:
    count = 0
    while (mask & 1) == bit:
        mask >>= 1
        count += 1
    return count, mask


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, width) pairs for the red, green and blue channel masks."""
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
        shift, mask = _trailing_run(mask, 0)
        width, _ = _trailing_run(mask, 1)
        shifts.extend((shift, width))
    return tuple(shifts)


def good_color(color: int, depth: int, decrgb: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of this depth."""
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    pixel = (
        ((red >> (16 - decrgb[1])) << decrgb[0])
        + ((green >> (16 - decrgb[3])) << decrgb[2])
        + ((blue >> (16 - decrgb[5])) << decrgb[4])
    )
    return pixel & 0xFFFFFFFF


class Image:
    """A ZPixmap-style image backed by a zero-filled byte buffer.

    ``byte_order`` is 0 for little-endian pixels and 1 for big-endian.
    """

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        byte_order: int = 0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel not in (8, 16, 24, 32):
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        if byte_order not in (0, 1):
            raise ValueError(f"byte order must be 0 or 1, got {byte_order}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.byte_order = byte_order
        row_bits = width * bits_per_pixel
        padded = -(-row_bits // _ROW_PAD_BITS) * _ROW_PAD_BITS
        self.size_line = padded // 8
        self.data = bytearray((width + _EXTRA_COLUMNS) * height * 4)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _endianness(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at (x, y) in the image byte order."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._endianness)

    def get_pixel(self, x: int, y: int) -> int:
        """Read the unsigned pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._endianness)
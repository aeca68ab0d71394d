from typing import NamedTuple, Optional


class PixelDiff(NamedTuple):
    """Biased per-channel deltas, ready to be packed into a chunk."""

    r: int
    g: int
    b: int


class Pixel(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_buffer(cls, data, offset: int, channels: int) -> "Pixel":
        """Read one pixel starting at ``offset``. Alpha is 255 for RGB input."""
        if channels == 4:
            return cls(data[offset], data[offset + 1], data[offset + 2], data[offset + 3])
        return cls(data[offset], data[offset + 1], data[offset + 2], 255)

    def equals(self, other: "Pixel", channels: int) -> bool:
        """Compare two pixels, ignoring alpha when the image has no alpha channel."""
        return (
            self.r == other.r
            and self.g == other.g
            and self.b == other.b
            and (channels == 3 or self.a == other.a)
        )

    def index_hash(self) -> int:
        """Calculates the index position for the color array."""
        return (self.r * 3 + self.g * 5 + self.b * 7 + self.a * 11) % 64

    def diff(self, prev: "Pixel") -> Optional[PixelDiff]:
        """
        Deltas for QOI_OP_DIFF, or None when any channel is out of range.

        Subtraction wraps like 8-bit unsigned arithmetic, so a delta of -1
        becomes 255 and then 1 once the bias of 2 is added.
        """
        dr = (self.r - prev.r + 2) & 0xFF
        dg = (self.g - prev.g + 2) & 0xFF
        db = (self.b - prev.b + 2) & 0xFF

        if dr < 4 and dg < 4 and db < 4:
            return PixelDiff(dr, dg, db)
        return None

    def luma(self, prev: "Pixel") -> Optional[PixelDiff]:
        """
        Deltas for QOI_OP_LUMA, or None when they do not fit.

        The green delta is biased by 32 into 6 bits. Red and blue are sent
        relative to green (dr - dg, db - dg), biased by 8 into 4 bits each.
        The biased values are the ones range-checked and stored.
        """
        vg = (self.g - prev.g) & 0xFF
        if vg > 127:
            vg -= 256

        if not (-32 <= vg <= 31):
            return None

        vr = (self.r - prev.r) & 0xFF
        vb = (self.b - prev.b) & 0xFF

        dr_dg = (vr - vg + 8) & 0xFF
        db_dg = (vb - vg + 8) & 0xFF

        if dr_dg < 16 and db_dg < 16:
            return PixelDiff(dr_dg, vg + 32, db_dg)
        return None

    def to_bytes(self, channels: int) -> bytes:
        if channels == 4:
            return bytes((self.r, self.g, self.b, self.a))
        return bytes((self.r, self.g, self.b))


OPAQUE_BLACK = Pixel(0, 0, 0, 255)
ZERO_PIXEL = Pixel(0, 0, 0, 0)

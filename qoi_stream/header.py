import struct
from dataclasses import dataclass

from .chunks import QOI_HEADER_SIZE, QOI_MAGIC


@dataclass(frozen=True)
class Header:
    width: int
    height: int
    channels: int
    colorspace: int = 0
    magic: bytes = QOI_MAGIC

    @classmethod
    def build(cls, width: int, height: int, channels: int) -> "Header":
        # Channel count is checked by the encoder, not here
        return cls(width=width, height=height, channels=channels, colorspace=0)

    def to_bytes(self) -> bytes:
        # 0-3: magic "qoif"
        # 4-7: width (Big Endian), 8-11: height (Big Endian)
        # 12: channels, 13: colorspace
        return self.magic + struct.pack(
            ">IIBB", self.width, self.height, self.channels, self.colorspace
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Header":
        if len(data) < QOI_HEADER_SIZE:
            raise ValueError("QOI.header: File too short for header")

        magic, width, height, channels, colorspace = struct.unpack(
            ">4sIIBB", data[:QOI_HEADER_SIZE]
        )
        if magic != QOI_MAGIC:
            raise ValueError("QOI.header: The signature of the QOI file is invalid")

        return cls(width=width, height=height, channels=channels, colorspace=colorspace)


def serialize(header: Header) -> bytes:
    return header.to_bytes()

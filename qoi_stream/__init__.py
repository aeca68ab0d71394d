from .encoder import QOIEncoder, compress, encode_pixels
from .header import Header, serialize
from .pixel import Pixel, PixelDiff
from .utils import load_image

__all__ = [
    "QOIEncoder",
    "Header",
    "Pixel",
    "PixelDiff",
    "compress",
    "encode_pixels",
    "load_image",
    "serialize",
]

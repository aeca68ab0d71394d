import numpy as np

from .chunks import (
    QOI_END_MARKER,
    QOI_RUN_MAX,
    write_diff,
    write_index,
    write_literal,
    write_luma,
    write_run,
)
from .header import Header
from .pixel import OPAQUE_BLACK, ZERO_PIXEL, Pixel


def _as_bytes(color_data) -> bytes:
    """Accept bytes-like objects, lists of ints and uint8 numpy arrays."""
    if isinstance(color_data, np.ndarray):
        if color_data.dtype != np.uint8:
            raise ValueError("QOI.encode: Pixel array must be of dtype uint8")
        return np.ascontiguousarray(color_data).tobytes()
    return bytes(color_data)


def encode_pixels(color_data, channels: int) -> bytes:
    """
    Encode raw pixels into a QOI chunk stream.

    The result holds the chunks followed by the end marker, without the
    14-byte header.

    :param color_data: Bytes-like object, list of ints or uint8 numpy array
                       containing interleaved pixel data.
    :param channels: 3 (RGB) or 4 (RGBA).
    :return: bytes object containing the encoded chunk stream.
    """
    if channels not in (3, 4):
        raise ValueError("QOI.encode: Invalid channel count, must be 3 or 4")

    data = _as_bytes(color_data)
    if len(data) % channels != 0:
        raise ValueError(
            "QOI.encode: The length of colorData is not a multiple of the channel count"
        )

    result = bytearray()

    # Encoding State
    prev = OPAQUE_BLACK
    run = 0
    index = [ZERO_PIXEL] * 64

    # --- Pixel Loop ---
    for i in range(0, len(data), channels):
        px = Pixel.from_buffer(data, i, channels)
        index_pos = px.index_hash()

        if px.equals(prev, channels):
            run += 1
            if run == QOI_RUN_MAX:
                write_run(result, run)
                run = 0
        else:
            # If we were in a run, end it before processing the new pixel
            if run > 0:
                write_run(result, run)
                run = 0

            # Lookup first, then the cheapest delta encodings, then a literal
            if px.equals(index[index_pos], channels):
                write_index(result, index_pos)
            else:
                # Diff and luma compare RGB only. An alpha change within range
                # is not carried, so RGBA input with varying alpha is lossy.
                diff = px.diff(prev)
                luma = px.luma(prev) if diff is None else None

                if diff is not None:
                    write_diff(result, diff)
                elif luma is not None:
                    write_luma(result, luma)
                else:
                    write_literal(result, px, channels)

            prev = px

        index[index_pos] = px

    if run > 0:
        write_run(result, run)

    # --- End Marker ---
    result.extend(QOI_END_MARKER)

    return bytes(result)


def _check_dimensions(width, height):
    if width is None or not (0 <= width < 4294967296):
        raise ValueError("QOI.encode: Invalid description.width")

    if height is None or not (0 <= height < 4294967296):
        raise ValueError("QOI.encode: Invalid description.height")


def compress(color_data, width: int, height: int, channels: int) -> bytes:
    """Header followed by the encoded chunk stream."""
    _check_dimensions(width, height)
    header = Header.build(width, height, channels)
    return header.to_bytes() + encode_pixels(color_data, channels)


class QOIEncoder:
    @staticmethod
    def encode(color_data, description: dict) -> bytes:
        """
        Encode a QOI file.

        :param color_data: Bytes-like object (bytes, bytearray, list of ints, uint8 ndarray)
                           containing pixel data.
        :param description: Dictionary containing 'width', 'height', 'channels' and
                            optionally 'colorspace', which must be 0 (sRGB).
        :return: bytes object containing the QOI file content.
        """
        width = description.get("width")
        height = description.get("height")
        channels = description.get("channels")
        colorspace = description.get("colorspace", 0)

        # --- Validation ---
        _check_dimensions(width, height)

        if channels not in (3, 4):
            raise ValueError("QOI.encode: Invalid description.channels, must be 3 or 4")

        if colorspace != 0:
            raise ValueError("QOI.encode: Invalid description.colorspace, must be 0")

        data = _as_bytes(color_data)
        if len(data) != width * height * channels:
            raise ValueError("QOI.encode: The length of colorData is incorrect")

        header = Header.build(width, height, channels)
        return header.to_bytes() + encode_pixels(data, channels)

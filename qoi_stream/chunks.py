class QOIOp:
    # Two-bit tags live in the high bits of the first byte
    INDEX = 0x00
    DIFF = 0x40
    LUMA = 0x80
    RUN = 0xC0
    # Full-byte tags
    RGB = 0xFE
    RGBA = 0xFF



QOI_MAGIC = b"qoif"
QOI_HEADER_SIZE = 14
QOI_RUN_MAX = 62
QOI_END_MARKER = b"\x00\x00\x00\x00\x00\x00\x00\x01"


def write_index(out: bytearray, slot: int):
    """QOI_OP_INDEX (00xxxxxx): reference to one of the 64 cached pixels."""
    out.append(QOIOp.INDEX | slot)


def write_diff(out: bytearray, diff):
    """QOI_OP_DIFF (01rrggbb): three 2-bit deltas, each biased by 2."""
    out.append(QOIOp.DIFF | (diff.r << 4) | (diff.g << 2) | diff.b)


def write_luma(out: bytearray, luma):
    """
    QOI_OP_LUMA (10gggggg rrrrbbbb).

    ``luma.g`` is the green delta biased by 32, ``luma.r`` and ``luma.b`` are
    dr - dg and db - dg biased by 8.
    """
    out.append(QOIOp.LUMA | luma.g)
    out.append((luma.r << 4) | luma.b)


def write_run(out: bytearray, length: int):
    """QOI_OP_RUN (11xxxxxx): the previous pixel repeated ``length`` times."""
    if not (1 <= length <= QOI_RUN_MAX):
        raise ValueError(f"QOI.encode: Invalid run length {length}")
    out.append(QOIOp.RUN | (length - 1))


def write_literal(out: bytearray, pixel, channels: int):
    """QOI_OP_RGB or QOI_OP_RGBA, picked by channel count."""
    if channels == 3:
        out.append(QOIOp.RGB)
        out.extend(pixel.to_bytes(3))
    elif channels == 4:
        out.append(QOIOp.RGBA)
        out.extend(pixel.to_bytes(4))
    else:
        raise ValueError("QOI.encode: Invalid channel count, must be 3 or 4")

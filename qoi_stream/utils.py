import numpy as np
from PIL import Image

RAW_EXTENSIONS = ("dng", "cr2", "nef", "arw", "raw")


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load an image and return pixel data as numpy array + description."""

    ext = filepath.lower().split(".")[-1]

    if ext in RAW_EXTENSIONS:
        # RAW formats - requires rawpy
        import rawpy

        with rawpy.imread(filepath) as raw:
            rgb = raw.postprocess()
        img = Image.fromarray(rgb)
    else:
        # Standard formats (PNG, JPEG, etc.)
        img = Image.open(filepath)

    # Keep alpha when the source has any, otherwise drop to RGB
    if img.mode == "RGBA":
        channels = 4
    elif img.mode in ("LA", "PA") or (img.mode == "P" and "transparency" in img.info):
        img = img.convert("RGBA")
        channels = 4
    else:
        img = img.convert("RGB")
        channels = 3

    return np.asarray(img, dtype=np.uint8), {
        "width": img.size[0],
        "height": img.size[1],
        "channels": channels,
        "colorspace": 0,
    }

from qoi_stream import QOIEncoder, load_image

INPUT_IMAGE = "fruits.png"
OUTPUT_QOI = "fruits.qoi"

if __name__ == "__main__":
    pixel_data, desc = load_image(INPUT_IMAGE)
    print(
        f"Loaded image {INPUT_IMAGE}: {desc['width']}x{desc['height']} Channels: {desc['channels']}"
    )
    print(f"Original {INPUT_IMAGE} {pixel_data.nbytes} bytes")

    encoded = QOIEncoder.encode(pixel_data, desc)

    with open(OUTPUT_QOI, "wb") as f:
        f.write(encoded)

    print(f"Encoded QOI to {len(encoded)} bytes ({len(encoded) / pixel_data.nbytes:.1%})")

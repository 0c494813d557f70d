class ExternalFiles:
    PALETTE_FILE = "palette.pal"
    DEFAULT_OUTPUT_STEM = "sprite-sheet-pixel-art"


FORMAT_EXTENSIONS = {
    "png": ".png",
    "webp": ".webp",
}

PIL_FORMATS = {
    "png": "PNG",
    "webp": "WEBP",
}

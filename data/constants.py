SEPARATOR_LINE_LENGTH = 60

SETTINGS_FILE_NAME = "sprite-remixer-settings.json"

# Configuration boundary limits
MIN_TARGET_SIZE = 8
MIN_GRID_SIZE = 1
MIN_TOLERANCE = 0
MAX_TOLERANCE = 255
MIN_EROSION = 0
MAX_EROSION = 10
MIN_FPS = 1
MAX_FPS = 60
MIN_PALETTE_COLORS = 2
MAX_PALETTE_COLORS = 256

DEFAULT_SETTINGS = {
    "srcCols": 8,
    "srcRows": 4,
    "targetWidth": 32,
    "targetHeight": 32,
    "fps": 12,
}

DEFAULT_OUTPUT_COLS = 0  # 0 = auto
DEFAULT_OUTPUT_FORMAT = "webp"
DEFAULT_TOLERANCE = 10
DEFAULT_EROSION = 0
DEFAULT_SAMPLING_QUALITY = "medium"

# Frames with fewer than 1% of pixels above this alpha are dropped
EMPTY_ALPHA_CUTOFF = 10
EMPTY_FRAME_THRESHOLD = 0.01

GIF_BATCH_SIZE = 10
VIDEO_BATCH_SIZE = 5
FRAME_GENERATION_BATCH_SIZE = 100

VIDEO_ASSUMED_FPS = 30

SAMPLING_CONFIGS = {
    "low": {"label": "Low (light)", "sample_interval": 15, "max_frames": 30},
    "medium": {"label": "Medium (standard)", "sample_interval": 10, "max_frames": 50},
    "high": {"label": "High (detailed)", "sample_interval": 5, "max_frames": 100},
    "ultra": {"label": "Ultra (all)", "sample_interval": 2, "max_frames": 200},
}

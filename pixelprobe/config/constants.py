"""Application-wide constants."""

APP_NAME = "PixelProbe"
APP_VERSION = "0.1.0"
ORG_NAME = "PixelProbe"
ORG_DOMAIN = "pixelprobe.org"

# Readout text
EMPTY_READOUT = "x: -, y: -"
LOCK_SUFFIX = " (locked)"
READOUT_TOOLTIP = "Pixel coordinates under cursor"

# Canvas discovery scoring
UNIFORMITY_THRESHOLD = 0.90
UNIFORMITY_WEIGHT = 2.0
LEAF_BONUS = 0.5

# Ancestor levels searched around a pointer source when no scroll area is found
ANCESTOR_SEARCH_DEPTH = 5

# Relative tolerance under which x/y scale factors count as the same zoom
NEAR_UNIFORM_TOLERANCE = 0.05

# Lower bound for the letterbox scale factor
MIN_LETTERBOX_SCALE = 0.0001

# Zoom bounds (percentage)
ZOOM_MIN = 10
ZOOM_MAX = 3200
ZOOM_DEFAULT = 100

# Zoom step ladder (percentage values)
ZOOM_STEPS = [
    10,
    15,
    20,
    25,
    33,
    50,
    67,
    75,
    100,
    125,
    150,
    200,
    250,
    300,
    400,
    500,
    600,
    800,
    1200,
    1600,
    2400,
    3200,
]

# Raster formats recognised by suffix
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp"})

MAX_RECENT_FILES = 10

# Window defaults
DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 700

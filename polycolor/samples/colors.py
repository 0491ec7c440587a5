import numpy as np
# RED
RED_RGB = np.array([1.0, 0.0, 0.0])
RED_HSB = np.array([0.0, 1.0, 1.0])
RED_HSL = np.array([0.0, 1.0, 0.5])
RED_CSS = "rgb(255, 0, 0)"

# GREEN
GREEN_RGB = np.array([0.0, 1.0, 0.0])
GREEN_HSB = np.array([120.0, 1.0, 1.0])
GREEN_HSL = np.array([120.0, 1.0, 0.5])
GREEN_CSS = "rgb(0, 255, 0)"

# BLUE
BLUE_RGB = np.array([0.0, 0.0, 1.0])
BLUE_HSB = np.array([240.0, 1.0, 1.0])
BLUE_HSL = np.array([240.0, 1.0, 0.5])
BLUE_CSS = "rgb(0, 0, 255)"

# YELLOW
YELLOW_RGB = np.array([1.0, 1.0, 0.0])
YELLOW_HSB = np.array([60.0, 1.0, 1.0])
YELLOW_HSL = np.array([60.0, 1.0, 0.5])

# MAGENTA
MAGENTA_RGB = np.array([1.0, 0.0, 1.0])
MAGENTA_HSB = np.array([300.0, 1.0, 1.0])
MAGENTA_HSL = np.array([300.0, 1.0, 0.5])

# CYAN
CYAN_RGB = np.array([0.0, 1.0, 1.0])
CYAN_HSB = np.array([180.0, 1.0, 1.0])
CYAN_HSL = np.array([180.0, 1.0, 0.5])

# WHITE
WHITE_RGB = np.array([1.0, 1.0, 1.0])
WHITE_HSB = np.array([0.0, 0.0, 1.0])
WHITE_HSL = np.array([0.0, 0.0, 1.0])

# BLACK
BLACK_RGB = np.array([0.0, 0.0, 0.0])
BLACK_HSB = np.array([0.0, 0.0, 0.0])
BLACK_HSL = np.array([0.0, 0.0, 0.0])

# Non-primary
DARK_ORANGE_RGB = np.array([0.8, 0.4, 0.0])
DARK_ORANGE_HSB = np.array([30.0, 1.0, 0.8])
DARK_ORANGE_HSL = np.array([30.0, 1.0, 0.4])

MUTED_TEAL_RGB = np.array([0.25, 0.5, 0.5])
MUTED_TEAL_HSB = np.array([180.0, 0.5, 0.5])
MUTED_TEAL_HSL = np.array([180.0, 1.0 / 3.0, 0.375])

SAMPLES = {
    "red": (RED_RGB, RED_HSB, RED_HSL),
    "green": (GREEN_RGB, GREEN_HSB, GREEN_HSL),
    "blue": (BLUE_RGB, BLUE_HSB, BLUE_HSL),
    "yellow": (YELLOW_RGB, YELLOW_HSB, YELLOW_HSL),
    "magenta": (MAGENTA_RGB, MAGENTA_HSB, MAGENTA_HSL),
    "cyan": (CYAN_RGB, CYAN_HSB, CYAN_HSL),
    "white": (WHITE_RGB, WHITE_HSB, WHITE_HSL),
    "black": (BLACK_RGB, BLACK_HSB, BLACK_HSL),
    "dark_orange": (DARK_ORANGE_RGB, DARK_ORANGE_HSB, DARK_ORANGE_HSL),
    "muted_teal": (MUTED_TEAL_RGB, MUTED_TEAL_HSB, MUTED_TEAL_HSL),
}

# (rgb, expected css) pairs, including channels that land on .5 before rounding
CSS_SAMPLES = [
    ((1.0, 0.0, 0.0), "rgb(255, 0, 0)"),
    ((0.0, 0.0, 0.0), "rgb(0, 0, 0)"),
    ((0.5, 0.5, 0.5), "rgb(128, 128, 128)"),
    ((0.2, 0.4, 0.6), "rgb(51, 102, 153)"),
]

"""Standard architectural layer definitions."""

from __future__ import annotations

from ezdxf import colors

from .value_objects import Layer

# Layer name constants
LAYER_WALL = "ARCH-WALL"
LAYER_PARTITION = "ARCH-PARTITION"
LAYER_DOOR = "ARCH-DOOR"
LAYER_WINDOW = "ARCH-WINDOW"
LAYER_FURNITURE = "ARCH-FURNITURE"
LAYER_TEXT = "ARCH-TEXT"
LAYER_CURVE = "ARCH-CURVE"

# Valid ACI range for a layer colour. 0 (BYBLOCK) and 256 (BYLAYER) are not
# layer colours.
MIN_LAYER_COLOR = 1
MAX_LAYER_COLOR = 255

# Order matters: it is the order of the LAYER table in every saved file.
STANDARD_LAYERS: tuple[Layer, ...] = (
    Layer(LAYER_WALL, colors.WHITE),  # 7 - main walls
    Layer(LAYER_PARTITION, colors.GRAY),  # 8 - inner walls
    Layer(LAYER_DOOR, colors.YELLOW),  # 2
    Layer(LAYER_WINDOW, colors.CYAN),  # 4
    Layer(LAYER_FURNITURE, colors.RED),  # 1
    Layer(LAYER_TEXT, colors.GREEN),  # 3
    Layer(LAYER_CURVE, colors.MAGENTA),  # 6
)

DEFAULT_ACTIVE_LAYER = LAYER_WALL


def standard_layer_names() -> list[str]:
    """Return the standard layer names in table order."""
    return [layer.name for layer in STANDARD_LAYERS]

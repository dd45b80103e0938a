"""Library-wide constants."""

APP_NAME = "LayerKit"
ORG_NAME = "LayerKit"

# Base name for new layers; uniquefied with a numeric suffix
LAYER_NAME_DEFAULT = "Layer"

# Reserved names (invariant, never localised)
DEFAULT_LAYER_NAME = "Layer 0"
TEMP_LAYER_NAME = "temp"
VARIOUS_LAYER_NAME = "various"

# The Default Layer always lives at this index
DEFAULT_LAYER_INDEX = 0

# Default layer properties
LAYER_COLOR_DEFAULT = "#000000"
LAYER_STATUS_DEFAULT = False
LAYER_DISPLAY_DEFAULT = True
LAYER_LOCK_DEFAULT = False

# Placed between a name and its uniquefier number
UNIQUEFIER_SEPARATOR = " "

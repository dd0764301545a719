"""
Default Configuration Constants for mtx_layout

Python-side defaults used when a value is absent from defaults.yaml.
Keep these in sync with the YAML file.

Import Policy:
    from mtx_layout.config.defaults import DEFAULT_PADDING_MODULO

DO NOT use: from mtx_layout.config.defaults import *
"""

# =============================================================================
# Layout Defaults
# =============================================================================

# Element type name for layout values (see config.enums.ElementType)
DEFAULT_ELEMENT_TYPE = "float64"

# Row width alignment for the padded SOA-ELLPACK layout.
# 16 matches a 512-bit vector of float32 lanes.
DEFAULT_PADDING_MODULO = 16

# Value written into padded value cells
DEFAULT_ZERO_VALUE = 0.0

# Column index written into padded column cells
PAD_COLUMN = -1

# Column index dtype for SOA layouts
INDEX_DTYPE = "int32"

# =============================================================================
# Synthetic Vector Defaults
# =============================================================================

DEFAULT_SYNTHETIC_LOW = 0.0
DEFAULT_SYNTHETIC_HIGH = 1.0

# =============================================================================
# Logging Defaults
# =============================================================================

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

"""Shared constants for fmtengine.

This module provides centralized configuration constants used across
the syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Rendering defaults: fill, precision, ellipsis
- Numeric layout: group sizes, radix prefixes, precision minimums
- Locale: fallback locale code

Python 3.11+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Rendering defaults
    "DEFAULT_FILL",
    "DEFAULT_FLOAT_PRECISION",
    "ELLIPSIS",
    # Numeric layout
    "DECIMAL_GROUP_SIZE",
    "RADIX_GROUP_SIZE",
    "HEX_ALTERNATE_PREFIX",
    "MIN_WIDTH",
    "MIN_PRECISION",
    "MIN_SIGNIFICANT_PRECISION",
    "MAX_SIZE",
    # Locale
    "FALLBACK_LOCALE",
]

# ============================================================================
# RENDERING DEFAULTS
# ============================================================================

# Fill text used by the aligner when a placeholder names no fill.
DEFAULT_FILL: str = " "

# Precision used by fixed, exponential, general and locale-number
# specifiers when the placeholder carries none.
DEFAULT_FLOAT_PRECISION: int = 6

# Marker appended by alternate-form string truncation.
# Measured in grapheme clusters, so a composite marker is allowed.
ELLIPSIS: str = "…"

# ============================================================================
# NUMERIC LAYOUT
# ============================================================================

# Digits per group for decimal, fixed, exponential and general output.
DECIMAL_GROUP_SIZE: int = 3

# Digits per group for binary, octal and hexadecimal output.
RADIX_GROUP_SIZE: int = 4

# Alternate-form prefix for both hex specifiers.
# Always lowercase: '0xABCD', never '0XABCD'.
HEX_ALTERNATE_PREFIX: str = "0x"

# Lower bounds for resolved sizes.
MIN_WIDTH: int = 0
MIN_PRECISION: int = 0

# Lower bound for precision of the general and locale-number specifiers.
# Zero significant digits has no meaning.
MIN_SIGNIFICANT_PRECISION: int = 1

# Upper bound for every resolved width and precision. Larger sizes would
# exhaust memory while padding or overflow the host float formatter.
MAX_SIZE: int = 10_000

# ============================================================================
# LOCALE
# ============================================================================

# Locale used when the requested locale is unknown or malformed.
FALLBACK_LOCALE: str = "en_US"

"""Color conversion utilities

Hex <-> RGBA conversions shared by the stroke model and the renderers.
Channels are integers in the 0-255 range.
"""

from typing import Tuple


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB (0-255 range) to a 6-digit hex string

    Args:
        r: Red value (0-255)
        g: Green value (0-255)
        b: Blue value (0-255)

    Returns:
        Hex color string (e.g., "#FF5733")

    Example:
        >>> rgb_to_hex(255, 87, 51)
        '#FF5733'
    """
    return '#{:02X}{:02X}{:02X}'.format(r, g, b)


def hex_to_rgba(hex_color: str) -> Tuple[int, int, int, int]:
    """
    Convert hex color to RGBA tuple (0-255 range)

    Accepts '#RGB', '#RRGGBB' and '#RRGGBBAA' (leading '#' optional).
    Alpha defaults to 255.

    Args:
        hex_color: Hex color string (e.g., '#AABBCC' or 'AABBCC80')

    Returns:
        Tuple of (r, g, b, a)

    Raises:
        ValueError: If the string is not a valid hex color
    """
    value = hex_color.strip().lstrip('#')
    # Handle 3-digit hex codes
    if len(value) == 3:
        value = ''.join([c*2 for c in value])
    if len(value) == 6:
        value += 'FF'
    if len(value) != 8:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        r, g, b, a = (int(value[i:i+2], 16) for i in (0, 2, 4, 6))
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from None
    return r, g, b, a


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple (0-255 range), dropping any alpha"""
    r, g, b, _ = hex_to_rgba(hex_color)
    return r, g, b


__all__ = [
    'rgb_to_hex',
    'hex_to_rgba',
    'hex_to_rgb',
]

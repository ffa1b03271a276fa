"""
Mathematical utilities for Massing Roofs Generator.

Provides small scalar and interpolation helpers shared by the roof
builders.
"""


def clamp(value: float, min_val: float, max_val: float) -> float:
    """
    Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def normalize_angle(angle_deg: float) -> float:
    """
    Normalize angle to range [0, 360).

    Args:
        angle_deg: Angle in degrees

    Returns:
        Normalized angle in [0, 360)
    """
    return angle_deg % 360.0


def inverse_lerp(a: float, b: float, value: float) -> float:
    """
    Position of value between a and b, as a fraction.

    Returns 0 when a and b coincide.
    """
    span = b - a
    if abs(span) < 1e-12:
        return 0.0
    return (value - a) / span

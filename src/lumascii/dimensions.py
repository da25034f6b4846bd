import math

from lumascii.errors import InvalidDimensionSpecError

# Largest width or height accepted, an unsigned 32-bit value
MAX_DIMENSION = 2**32 - 1


def _check_bounds(width: int, height: int, value) -> tuple[int, int]:
    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise InvalidDimensionSpecError(f"dimensions too large: {value}")
    return width, height


def parse_resize(value: str) -> tuple[int, int]:
    """Parse a "<width>x<height>" string into a pair of ints."""
    width, sep, height = value.partition("x")
    if not sep:
        raise InvalidDimensionSpecError(f"invalid resize value: {value}")
    # ASCII digits only; isdecimal() alone accepts other scripts
    if not (width.isascii() and height.isascii() and width.isdecimal() and height.isdecimal()):
        raise InvalidDimensionSpecError(f"invalid resize value: {value}")
    return _check_bounds(int(width), int(height), value)


def resolve_dimensions(
    source_size: tuple[int, int],
    resize: str | None = None,
    scale: float | None = None,
) -> tuple[int, int]:
    """Work out the output grid size.

    An explicit resize string wins over a scale factor, and with neither the
    source size is returned unchanged. A scale of 0 counts as unset. Sizes
    that come out as 0 are passed through and render as empty output.
    """
    if resize:
        return parse_resize(resize)

    if scale:
        if scale < 0 or not math.isfinite(scale):
            raise InvalidDimensionSpecError(f"invalid scale factor: {scale}")
        width, height = source_size
        return _check_bounds(math.floor(width * scale), math.floor(height * scale), f"scale {scale}")

    return source_size

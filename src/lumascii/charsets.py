from collections.abc import Mapping
from types import MappingProxyType

from lumascii.errors import UnknownCharsetError

# Print-density ramp, sparse glyphs first, dense glyphs last
ASCII = ".'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

CHARSETS: Mapping[str, str] = MappingProxyType(
    {
        "ascii": ASCII,
    }
)

DEFAULT_CHARSET = "ascii"


def get_charset(name: str, charsets: Mapping[str, str] = CHARSETS) -> str:
    """Look up a character ramp by name."""
    try:
        ramp = charsets[name]
    except KeyError:
        raise UnknownCharsetError(f"unknown character set: {name}") from None
    if not ramp:
        raise UnknownCharsetError(f"character set is empty: {name}")
    return ramp

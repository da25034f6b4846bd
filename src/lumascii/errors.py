class LumasciiError(Exception):
    """Base class for every failure that aborts a conversion."""


class MissingInputError(LumasciiError):
    pass


class UnsupportedFormatError(LumasciiError):
    pass


class DecodeError(LumasciiError):
    pass


class UnknownCharsetError(LumasciiError, KeyError):
    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class InvalidDimensionSpecError(LumasciiError, ValueError):
    pass


class OutputWriteError(LumasciiError):
    pass

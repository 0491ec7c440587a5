"""Exception and warning types raised by polycolor."""


class UnsupportedConversionError(ValueError):
    """Raised when two representations have no meaningful conversion.

    Gradient colors carry a gradient reference and anchor points, not scalar
    channels, so they cannot be converted to or from gray/rgb/hsb/hsl.
    """

    def __init__(self, from_type: str, to_type: str):
        self.from_type = from_type
        self.to_type = to_type
        super().__init__(f"Cannot convert color from {from_type!r} to {to_type!r}")


class ColorParseWarning(UserWarning):
    """Emitted when a color string cannot be interpreted.

    The color falls back to rgb black instead of raising.
    """

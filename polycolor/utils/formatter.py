from ..types.constants import DISPLAY_PRECISION


def format_number(value: float, precision: int = DISPLAY_PRECISION) -> str:
    """
    Format a number with at most ``precision`` decimals.

    Trailing zeros and a trailing dot are dropped, so ``1.0`` renders as
    ``"1"`` and ``0.50000`` as ``"0.5"``. Negative zero renders as ``"0"``.
    """
    text = f"{round(float(value), precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text

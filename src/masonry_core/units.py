import math

Extent = float


def parse_float(value: str) -> float:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    text = text.replace(",", ".")
    return float(text)


def format_float(value: float, ndigits: int = 2) -> str:
    return f"{value:.{ndigits}f}"


def finite_or_zero(value: float) -> float:
    """Return ``value`` unless it is NaN or infinite, in which case 0."""
    return value if math.isfinite(value) else 0.0


def safe_int(value: float) -> int:
    return int(finite_or_zero(value))

"""WCAG relative luminance, contrast ratio and text colour selection."""

from palette_forge.core.types import RGB, WcagLevels

WHITE = '#ffffff'
BLACK = '#000000'

_WHITE_RGB = RGB(255, 255, 255)
_BLACK_RGB = RGB(0, 0, 0)

# Minimum ratio per level. aaa_large shares the aa threshold.
THRESHOLDS: dict[str, float] = {
    'aa': 4.5,
    'aaa': 7.0,
    'aa_large': 3.0,
    'aaa_large': 4.5,
}


def _linearize(v: int) -> float:
    c = v / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """sRGB relative luminance in [0, 1]."""
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def contrast_ratio(a: RGB, b: RGB) -> float:
    """Contrast ratio in [1, 21]. Symmetric in its arguments."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    return (max(la, lb) + 0.05) / (min(la, lb) + 0.05)


def accessible_text_color(bg: RGB) -> str:
    """White if it contrasts strictly better than black against bg, else black."""
    if contrast_ratio(bg, _WHITE_RGB) > contrast_ratio(bg, _BLACK_RGB):
        return WHITE
    return BLACK


def text_contrast(bg: RGB) -> tuple[str, float]:
    """Return (text colour, its contrast ratio against bg)."""
    text = accessible_text_color(bg)
    return text, contrast_ratio(bg, _WHITE_RGB if text == WHITE else _BLACK_RGB)


def wcag_levels(ratio: float) -> WcagLevels:
    return WcagLevels(
        aa=ratio >= THRESHOLDS['aa'],
        aaa=ratio >= THRESHOLDS['aaa'],
        aa_large=ratio >= THRESHOLDS['aa_large'],
        aaa_large=ratio >= THRESHOLDS['aaa_large'],
    )


def meets(ratio: float, level: str) -> bool:
    """True if ratio passes the named level ('aa', 'aaa', 'aa-large', 'aaa-large')."""
    key = level.lower().replace('-', '_')
    if key not in THRESHOLDS:
        raise KeyError(f'Unknown WCAG level: {level}. Available: {", ".join(sorted(THRESHOLDS))}')
    return ratio >= THRESHOLDS[key]

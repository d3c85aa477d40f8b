"""Best-effort colour names: nearest CSS colour keyword by RGB distance.

The display layer only depends on the Namer protocol (`lookup(hex) -> str`).
NearestNamer is the default implementation. Names are not unique and
coverage is coarse; any hex gets the closest table entry.
"""

from typing import Protocol

import numpy as np

from palette_forge.core.convert import hex_to_rgb

UNKNOWN = 'Unknown'

# Display name -> hex. CSS colour keywords, duplicates (aqua/cyan, fuchsia/magenta, grey spellings) dropped.
NAMED_COLOURS: dict[str, str] = {
    'Black': '#000000',
    'White': '#ffffff',
    'Dim Gray': '#696969',
    'Gray': '#808080',
    'Dark Gray': '#a9a9a9',
    'Silver': '#c0c0c0',
    'Light Gray': '#d3d3d3',
    'Gainsboro': '#dcdcdc',
    'White Smoke': '#f5f5f5',
    'Slate Gray': '#708090',
    'Dark Slate Gray': '#2f4f4f',
    'Maroon': '#800000',
    'Dark Red': '#8b0000',
    'Brown': '#a52a2a',
    'Firebrick': '#b22222',
    'Crimson': '#dc143c',
    'Red': '#ff0000',
    'Tomato': '#ff6347',
    'Coral': '#ff7f50',
    'Indian Red': '#cd5c5c',
    'Light Coral': '#f08080',
    'Salmon': '#fa8072',
    'Light Salmon': '#ffa07a',
    'Orange Red': '#ff4500',
    'Dark Orange': '#ff8c00',
    'Orange': '#ffa500',
    'Gold': '#ffd700',
    'Goldenrod': '#daa520',
    'Dark Goldenrod': '#b8860b',
    'Khaki': '#f0e68c',
    'Dark Khaki': '#bdb76b',
    'Yellow': '#ffff00',
    'Light Yellow': '#ffffe0',
    'Lemon Chiffon': '#fffacd',
    'Beige': '#f5f5dc',
    'Wheat': '#f5deb3',
    'Tan': '#d2b48c',
    'Burlywood': '#deb887',
    'Peru': '#cd853f',
    'Chocolate': '#d2691e',
    'Sienna': '#a0522d',
    'Saddle Brown': '#8b4513',
    'Olive': '#808000',
    'Olive Drab': '#6b8e23',
    'Dark Olive Green': '#556b2f',
    'Yellow Green': '#9acd32',
    'Lime Green': '#32cd32',
    'Lime': '#00ff00',
    'Lawn Green': '#7cfc00',
    'Chartreuse': '#7fff00',
    'Green Yellow': '#adff2f',
    'Pale Green': '#98fb98',
    'Light Green': '#90ee90',
    'Medium Sea Green': '#3cb371',
    'Sea Green': '#2e8b57',
    'Forest Green': '#228b22',
    'Green': '#008000',
    'Dark Green': '#006400',
    'Spring Green': '#00ff7f',
    'Medium Aquamarine': '#66cdaa',
    'Aquamarine': '#7fffd4',
    'Turquoise': '#40e0d0',
    'Medium Turquoise': '#48d1cc',
    'Dark Turquoise': '#00ced1',
    'Light Sea Green': '#20b2aa',
    'Cadet Blue': '#5f9ea0',
    'Dark Cyan': '#008b8b',
    'Teal': '#008080',
    'Cyan': '#00ffff',
    'Light Cyan': '#e0ffff',
    'Pale Turquoise': '#afeeee',
    'Powder Blue': '#b0e0e6',
    'Light Blue': '#add8e6',
    'Sky Blue': '#87ceeb',
    'Light Sky Blue': '#87cefa',
    'Deep Sky Blue': '#00bfff',
    'Dodger Blue': '#1e90ff',
    'Cornflower Blue': '#6495ed',
    'Steel Blue': '#4682b4',
    'Light Steel Blue': '#b0c4de',
    'Royal Blue': '#4169e1',
    'Blue': '#0000ff',
    'Medium Blue': '#0000cd',
    'Dark Blue': '#00008b',
    'Navy': '#000080',
    'Midnight Blue': '#191970',
    'Slate Blue': '#6a5acd',
    'Dark Slate Blue': '#483d8b',
    'Medium Slate Blue': '#7b68ee',
    'Medium Purple': '#9370db',
    'Blue Violet': '#8a2be2',
    'Indigo': '#4b0082',
    'Dark Orchid': '#9932cc',
    'Dark Violet': '#9400d3',
    'Medium Orchid': '#ba55d3',
    'Purple': '#800080',
    'Dark Magenta': '#8b008b',
    'Magenta': '#ff00ff',
    'Violet': '#ee82ee',
    'Orchid': '#da70d6',
    'Plum': '#dda0dd',
    'Thistle': '#d8bfd8',
    'Lavender': '#e6e6fa',
    'Medium Violet Red': '#c71585',
    'Deep Pink': '#ff1493',
    'Hot Pink': '#ff69b4',
    'Pale Violet Red': '#db7093',
    'Pink': '#ffc0cb',
    'Light Pink': '#ffb6c1',
    'Misty Rose': '#ffe4e1',
    'Peach Puff': '#ffdab9',
    'Moccasin': '#ffe4b5',
    'Ivory': '#fffff0',
    'Linen': '#faf0e6',
    'Alice Blue': '#f0f8ff',
    'Mint Cream': '#f5fffa',
    'Honeydew': '#f0fff0',
}

_NAMES: list[str] = list(NAMED_COLOURS)
_TABLE: np.ndarray = np.array(
    [hex_to_rgb(h).as_tuple() for h in NAMED_COLOURS.values()],  # type: ignore[union-attr]
    dtype=np.int64,
)


class Namer(Protocol):
    def lookup(self, hex_str: str) -> str: ...


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space. Uses int64 so channel differences never wrap."""
    diff = np.asarray(a, dtype=np.int64) - np.asarray(b, dtype=np.int64)
    return float(np.sqrt(np.sum(diff * diff)))


def nearest_colour(
    rgb: tuple[int, int, int], threshold: float | None = None
) -> tuple[str | None, float]:
    """Return (name, distance) of the closest named colour.

    With a threshold, name is None when the closest entry is further away.
    """
    dists = np.linalg.norm(_TABLE - np.asarray(rgb, dtype=np.int64), axis=1)
    idx = int(np.argmin(dists))
    dist = float(dists[idx])
    if threshold is not None and dist > threshold:
        return None, dist
    return _NAMES[idx], dist


class NearestNamer:
    """Namer backed by the NAMED_COLOURS table."""

    def lookup(self, hex_str: str) -> str:
        rgb = hex_to_rgb(hex_str)
        if rgb is None:
            return UNKNOWN
        name, _dist = nearest_colour(rgb.as_tuple())
        return name or UNKNOWN

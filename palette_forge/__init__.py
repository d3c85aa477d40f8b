"""palette-forge: colour harmony palettes, tonal scales and WCAG contrast checks."""

"""palette_forge.core — Foundation layer.

Contains colour conversions, contrast, harmony and scale generation, the
palette state, display formats, colour names, configuration and the report
builder. This module has NO dependencies on palette_forge.commands or
palette_forge.registry. Only stdlib and numpy are allowed here.
"""

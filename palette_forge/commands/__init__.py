"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by palette_forge.registry.discover(). Its module
docstring is the text printed by `palette-forge help <command>`.
"""

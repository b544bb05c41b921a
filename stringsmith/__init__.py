"""Extract translatable strings from source code into localization catalogs."""

__version__ = "0.1.0"

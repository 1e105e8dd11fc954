"""modgen: scaffold Express-style TypeScript modules from a module name."""

__version__ = "0.1.0"

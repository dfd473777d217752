"""Component readiness evaluation for QuayRegistry objects."""

__version__ = "0.1.0"

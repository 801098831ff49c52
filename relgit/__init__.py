"""Release-engineering repository layer: revision discovery and resilient git."""

__version__ = "0.1.0"

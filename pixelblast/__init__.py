"""A small tile-map arcade game with a minimal entity-component system."""

__version__ = "1.0.0"
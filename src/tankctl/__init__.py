"""tankctl — aquarium tank sizing and equipment advisor."""

__version__ = "0.3.0"

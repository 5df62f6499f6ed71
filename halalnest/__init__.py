"""HalalNest gateway: scholar assistant and prayer-times proxy."""

__version__ = "0.1.0"

"""hrconf — identifier format engine and company settings helpers."""

__version__ = "0.1.0"

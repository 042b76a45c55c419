"""Deterministic sampling helpers for 64-bit trace IDs."""

__version__ = "0.1.0"
__all__ = ["sampling_util"]
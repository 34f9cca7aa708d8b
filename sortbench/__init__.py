"""Timing harness, input generators and implementations of classic sorting algorithms."""

__version__ = "0.1.0"

__all__ = ["bench", "divide", "generators", "library", "simple", "timer"]
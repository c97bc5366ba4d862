"""Units, display modes, timestamps and throughput tracking for hierarchical progress reporting."""

__version__ = "0.1.0"

__all__ = ["kinds", "progress", "throughput", "timefmt", "unit"]
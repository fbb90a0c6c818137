"""Elastic circle collisions in serial and two-partition form, with rendering and a toy hash search."""

__version__ = "0.1.0"

__all__ = ["collider", "graphics", "hashcrack", "partitioned", "serial", "vectors"]
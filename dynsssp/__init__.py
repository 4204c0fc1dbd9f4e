"""Dynamic single-source shortest paths on weighted graphs, with partitioning into halo parts."""

__version__ = "0.1.0"
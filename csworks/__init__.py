"""Data-structure exercises: a stack, big integers, an expression assembler, a srcML profiler and sorting."""

__version__ = "0.1.0"
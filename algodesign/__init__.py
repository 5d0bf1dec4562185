"""Classic algorithm-design exercises with input-checking solvers and a command line."""

__version__ = "1.0.0"
__all__ = ["algorithms", "problems", "cli"]
"""Project Euler solutions 1 to 12 with a solver registry and a command-line runner."""

__version__ = "0.1.0"
__all__ = ["registry", "problems_early", "problems_later", "cli"]
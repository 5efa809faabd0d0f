"""Solutions to short competitive-programming problems, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["problems_a", "problems_b", "problems_c", "cli"]
"""Role-playing character classes with level-based stat growth and class resources."""

__version__ = "0.1.0"
__all__ = ["base", "characters", "formatting", "main"]
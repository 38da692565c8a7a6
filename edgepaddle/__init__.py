"""Edge-paddle arcade game: game rules, a score file and a pygame window."""

__version__ = "0.1.0"
__all__ = ["scores", "world", "app"]
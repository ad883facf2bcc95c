class TermFlappyError(Exception):
    """Base class for errors raised by the game package."""


class ConfigError(TermFlappyError, ValueError):
    """Raised when the screen size or tuning values cannot support a game."""

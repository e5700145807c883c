"""Bot strategies for driving Oh Hell games."""

from .baseline_first_legal import FirstLegalBot
from .random_bot import RandomBot

__all__ = ["FirstLegalBot", "RandomBot"]

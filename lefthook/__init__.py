"""Building blocks for a Git hooks manager: versions, commands, logging and self-update."""

__version__ = "1.11.13"
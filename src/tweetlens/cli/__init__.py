"""
tweetlens command-line interface.
"""

from tweetlens import __version__

__all__ = ["__version__"]

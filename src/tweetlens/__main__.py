"""Allow running tweetlens as ``python -m tweetlens``."""

from tweetlens.cli.main import main

if __name__ == "__main__":
    main()

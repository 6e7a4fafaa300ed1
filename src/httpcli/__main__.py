"""Allow running as ``python -m httpcli``."""

from httpcli.cli import main

if __name__ == "__main__":
    main()

"""Entry point for manual runs."""
from __future__ import annotations

from hotel_feed.cli import main

if __name__ == "__main__":
    main()

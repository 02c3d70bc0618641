"""leakbot — Telegram front end for the LeakOSINT breach-search API."""

__version__ = "0.1.0"

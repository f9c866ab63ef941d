"""Terminal ticket booking, check-in, refund and event management."""

__version__ = "1.0.0"
"""Extract reward redemption events from chat-bot log exports."""

__version__ = "0.1.0"

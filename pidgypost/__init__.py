"""Terminal chat client screen: a contact list beside a chat pane."""

__version__ = "0.1.0"
__all__ = ["__version__"]
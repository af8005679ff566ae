"""Focus flash exceptions."""


class FocusFlashError(Exception):
    """Raised when the focus flash system is misused by the embedding application."""

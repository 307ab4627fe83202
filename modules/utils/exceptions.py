class InvalidFormatException(ValueError):
    """Raised when a colour string is not a valid #RRGGBB value."""
    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class SamplingFailedException(Exception):
    """Raised when the screen colour picker fails to produce a sample."""
    pass


class ClipboardFailedException(Exception):
    """Raised when a colour cannot be written to the clipboard."""
    def __init__(self, message, role=None):
        super().__init__(message)
        self.role = role

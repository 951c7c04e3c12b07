"""User-facing errors raised by the scrap assistant."""


class ScrapAssistantError(Exception):
    """Base class; ``str(exc)`` is safe to show to the visitor."""


class ScrapIdentificationError(ScrapAssistantError):
    def __init__(self, message: str = "Could not identify the item. Please try a clearer image.") -> None:
        super().__init__(message)


class ScrapValuationError(ScrapAssistantError):
    def __init__(self, message: str = "Could not calculate the value. Please try again.") -> None:
        super().__init__(message)

"""Exceptions raised by thumbnail rendering."""

from typing import override


class InvalidThumbnailArgument(ValueError):
    """
    Raised when a thumbnail cannot be rendered from the given arguments.

    Covers a non-positive target size and a source image whose width or height
    is not positive. No canvas is produced when this is raised.
    """

    def __init__(self, message: str = "Invalid thumbnail argument."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"InvalidThumbnailArgument: {self.message}"

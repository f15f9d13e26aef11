from enum import Enum


class ErrorKind(Enum):
    FILE_SYSTEM = "FileSystem"
    FILE_TYPE = "FileType"
    PDF = "PDF"
    PAGE_VALIDATION = "PageValidation"


class ConversionError(Exception):
    """A fatal run error tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def tag(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return self.message

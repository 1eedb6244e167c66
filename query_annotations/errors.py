"""Exceptions raised by the annotation extractors."""


class AnnotationError(Exception):
    """Base class for all library errors."""


class InvalidArgumentError(AnnotationError, ValueError):
    """An argument is outside the domain the operation accepts."""


class DuplicateKeyError(AnnotationError, KeyError):
    """A key:value token repeats a key that was already extracted."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Duplicate key '{self.key}' in parameters"

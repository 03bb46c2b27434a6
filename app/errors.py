from __future__ import annotations


class Base32Error(ValueError):
    """Base class for every codec failure."""


class InvalidInput(Base32Error):
    pass


class EmptyInput(Base32Error):
    def __init__(self) -> None:
        super().__init__("string is empty")


class NormalizationRequired(Base32Error):
    def __init__(self, original: str, corrected: str) -> None:
        self.original = original
        self.corrected = corrected
        super().__init__(f'String "{original}" requires normalization (would become "{corrected}")')


class InvalidChecksumLength(Base32Error):
    def __init__(self, checksum: str) -> None:
        self.checksum = checksum
        super().__init__(f'Checksum "{checksum}" is too long; should be one character')


class InvalidCharacters(Base32Error):
    def __init__(self, string: str) -> None:
        self.string = string
        super().__init__(f'String "{string}" contains invalid characters')


class ChecksumMismatch(Base32Error):
    def __init__(self, checksum: str, body: str) -> None:
        self.checksum = checksum
        self.body = body
        super().__init__(f'Checksum symbol "{checksum}" is not correct for value "{body}".')


class NormalizationWarning(UserWarning):
    """Emitted by normalize() in warn mode when the input was corrected."""

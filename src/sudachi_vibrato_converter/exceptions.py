"""Custom exception hierarchy for sudachi-vibrato-converter."""

from __future__ import annotations

from pathlib import Path


class ConverterError(Exception):
    """Base exception for all sudachi-vibrato-converter errors."""


class MalformedRowError(ConverterError):
    """Input row no longer matches the expected schema (too few fields, bad integer)."""

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        row_number: int,
        field: str | None = None,
        value: str | None = None,
        observed: int | None = None,
        path: str | Path | None = None,
    ):
        self.kind = kind
        self.row_number = row_number
        self.field = field
        self.value = value
        self.observed = observed
        self.path = path
        super().__init__(message)

    def in_file(self, path: str | Path) -> MalformedRowError:
        """Copy of this error naming the file it came from."""
        return MalformedRowError(
            f"{path}: {self}",
            kind=self.kind,
            row_number=self.row_number,
            field=self.field,
            value=self.value,
            observed=self.observed,
            path=path,
        )


class UnreadableInputError(ConverterError):
    """Input is not valid UTF-8 text or not parseable as CSV."""

    def __init__(self, message: str, *, kind: str, row_number: int):
        self.kind = kind
        self.row_number = row_number
        super().__init__(message)


class ManifestError(ConverterError):
    """Conversion manifest could not be parsed or is incomplete."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)

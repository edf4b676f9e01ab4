"""Exception hierarchy shared by the loader, the index and the query API."""

from __future__ import annotations


class LexiconError(Exception):
    """Base class for every error raised by lexicon_pipeline."""


class DatasetError(LexiconError):
    """A single reference dataset could not be read or has an unusable header."""

    def __init__(self, dataset: str, message: str):
        super().__init__(f"{dataset}: {message}")
        self.dataset = dataset
        self.message = message


class ReferenceDataError(LexiconError):
    """The load phase failed; ``errors`` lists every dataset that failed."""

    def __init__(self, errors: list[DatasetError]):
        joined = "; ".join(str(e) for e in errors)
        super().__init__(f"reference data unavailable ({joined})")
        self.errors = list(errors)

    @property
    def datasets(self) -> list[str]:
        return [e.dataset for e in self.errors]


class DataUnavailableError(LexiconError):
    """A query was issued before the reference data finished loading."""

    def __init__(self, message: str = "reference data is not loaded"):
        super().__init__(message)

"""Custom exception hierarchy for examcentre.

Only data-loading failures are exceptions. Allocation outcomes are
returned as result objects (see examcentre.models).
"""


class ExamCentreError(Exception):
    """Base exception for all examcentre errors."""


class DataUnavailable(ExamCentreError):
    """A required dataset could not be read, or yielded no usable rows."""

    def __init__(self, path: str, dataset: str, detail: str = ""):
        self.path = path
        self.dataset = dataset
        self.detail = detail
        message = f"{dataset} data unavailable at: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class DataInvalid(ExamCentreError):
    """A dataset was read but its contents are not in the expected shape."""

    def __init__(self, path: str, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid data at {path}: {detail}")

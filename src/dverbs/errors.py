class DatasetUnreadable(Exception):
    """The verb dataset is missing or could not be parsed."""


class EmptyVerbList(RuntimeError):
    """The quiz engine was asked for a question while holding no verbs."""

    def __init__(self, message: str = "No verbs loaded"):
        super().__init__(message)

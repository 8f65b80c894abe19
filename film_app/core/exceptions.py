"""
Domain exceptions.

Raised by the data and orchestration layers; the API routers translate
them into HTTP status codes.
"""


class DatasetError(Exception):
    """Base class for every dataset-related failure."""


class DatasetLoadError(DatasetError):
    """The CSV source could not be read (missing file, bad encoding, ...)."""


class DatasetSchemaError(DatasetError):
    """The CSV header lacks one or more required columns."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required columns: {', '.join(self.missing)}")


class DatasetNotLoadedError(DatasetError):
    """A chart or series was requested before the dataset was loaded."""


class UnknownPanelError(KeyError):
    """No panel is registered under the given task id."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(task_id)

    def __str__(self) -> str:
        return f"Unknown panel '{self.task_id}'"


class UnknownSeriesError(KeyError):
    """No derived series is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown series '{self.name}'"

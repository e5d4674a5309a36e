class SampleError(ValueError):
    """Base class for everything that stops an aggregation run."""


class NoMatchingFilesError(SampleError):
    """Raised when no entry in the directory starts with the marker prefix."""
    def __init__(self, directory, prefix):
        self.directory = directory
        self.prefix = prefix
        super().__init__(f"No sample files starting with '{prefix}' found in {directory}")


class SampleReadError(SampleError):
    """Raised when a sample file cannot be opened or decoded."""
    def __init__(self, filepath, reason):
        self.filepath = filepath
        self.reason = reason
        super().__init__(f"Could not read {filepath}: {reason}")


class MalformedRecordError(SampleError):
    """Raised when a sample file does not hold two comma-space separated numbers."""
    def __init__(self, filepath, reason):
        self.filepath = filepath
        self.reason = reason
        super().__init__(f"Malformed record in {filepath}: {reason}")


class ExportError(SampleError):
    """Raised when the CSV or plot output cannot be written."""
    def __init__(self, filepath, reason):
        self.filepath = filepath
        self.reason = reason
        super().__init__(f"Could not write {filepath}: {reason}")


__all__ = [
    "SampleError",
    "NoMatchingFilesError",
    "SampleReadError",
    "MalformedRecordError",
    "ExportError",
]

from pathlib import Path


class PatchSourceError(Exception):
    """Raised when no patch text can be read from a file or service payload."""

    def __init__(self, source: str | Path, original_error: Exception):
        super().__init__(f"Could not read patch from {source}: {original_error}")
        self.source = source
        self.original_error = original_error


class EmptyPatchError(Exception):
    def __init__(self, message: str = "No patch available"):
        super().__init__(message)


class InvalidConfigError(Exception):
    def __init__(self, config_path: str | Path, original_error: Exception):
        super().__init__(f"Invalid config {config_path}: {original_error}")
        self.config_path = config_path
        self.original_error = original_error

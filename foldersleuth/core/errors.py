# foldersleuth/core/errors.py


class FolderSleuthError(Exception):
    """Base class for errors raised by foldersleuth."""
    pass


class InvalidPathError(FolderSleuthError):
    """Raised when the root to analyze is missing or is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"Invalid directory path: {path}")
        self.path = path

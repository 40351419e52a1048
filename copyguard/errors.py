from pathlib import Path


class CopyrightError(Exception):
    pass


class ConfigurationError(CopyrightError, ValueError):
    """
    The check was set up wrong (no files, no common root, no repository).
    """
    pass


class HeaderReadError(CopyrightError):
    """
    A candidate file could not be read. Aborts the whole check.
    """
    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to read {path}: {cause}")
        self.path = path

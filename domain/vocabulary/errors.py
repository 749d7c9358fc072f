class LoadError(Exception):
    """The vocabulary dataset could not be opened or read."""


class NotFoundError(LoadError):
    """The vocabulary dataset path does not exist."""

"""Exceptions related to kubedepot."""

__all__ = [
    "KubedepotException",
    "InputException",
    "ParseError",
    "LoadError",
    "MergeError",
    "EmptySectionError",
    "MultipleEntriesError",
    "DuplicateNameError",
    "ConfigNotFoundError",
]


class KubedepotException(Exception):
    """Generic base exception used for this library."""


class InputException(KubedepotException):
    """Raised when the input files or values are not formatted as expected."""


class ParseError(InputException):
    """Raised when a kubeconfig document can't be parsed."""

    def __init__(self, source: str | None, message: str) -> None:
        super().__init__(f"Invalid kubeconfig {source or '<input>'}: {message}")
        self.source = source
        self.message = message


class LoadError(KubedepotException):
    """Raised when the config store can't be loaded or validated."""


class MergeError(InputException):
    """Raised when a kubeconfig can't be merged into another one."""

    def __init__(
        self,
        section: str,
        message: str,
        config_name: str | None = None,
    ) -> None:
        if config_name:
            message = f"{message} (config '{config_name}')"
        super().__init__(message)
        self.section = section
        self.config_name = config_name


class EmptySectionError(MergeError):
    """Raised when a kubeconfig has no entries in a section."""

    def __init__(self, section: str, config_name: str | None = None) -> None:
        super().__init__(section, f"kubeconfig has no {section}", config_name)


class MultipleEntriesError(MergeError):
    """Raised when a kubeconfig has more than one entry in a section."""

    def __init__(self, section: str, config_name: str | None = None) -> None:
        super().__init__(
            section, f"kubeconfig has more than one entry in {section}", config_name
        )


class DuplicateNameError(MergeError):
    """Raised when an entry name is already used by the merged kubeconfig."""

    def __init__(
        self, section: str, entry_name: str, config_name: str | None = None
    ) -> None:
        super().__init__(
            section,
            f"kubeconfig has duplicate name '{entry_name}' in {section}",
            config_name,
        )
        self.entry_name = entry_name


class ConfigNotFoundError(KubedepotException):
    """Raised when a config name is not found in the store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"kubeconfig not found: {name}")
        self.name = name

from enum import Enum


class ConfigErrorKind(Enum):
    EMPTY_FILE = "empty file"
    PARSE_FAILURE = "parse failure"
    IO_FAILURE = "io failure"
    CONTEXT_NOT_FOUND = "context not found"


class ListErrorKind(Enum):
    CONFIG_INVALID = "config invalid"
    UNREACHABLE = "unreachable"
    API_ERROR = "api error"
    UNKNOWN = "unknown"


class ConfigError(Exception):
    """Configuration file could not be loaded or rewritten. Always fatal."""

    def __init__(self, kind: ConfigErrorKind, message: str = ""):
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)


class ListError(Exception):
    """Namespace listing failed for a single context. Shown on the context's node."""

    _DEFAULT_MESSAGES = {
        ListErrorKind.CONFIG_INVALID: "error in config file",
        ListErrorKind.UNREACHABLE: "unreachable",
        ListErrorKind.UNKNOWN: "error",
    }

    def __init__(self, kind: ListErrorKind, detail: str = ""):
        self.kind = kind
        self.detail = detail
        if kind == ListErrorKind.API_ERROR:
            message = f"error from api: {detail}" if detail else "error from api"
        else:
            message = self._DEFAULT_MESSAGES[kind]
        self.message = message
        super().__init__(message)

# Custom exceptions for allways

class AllwaysError(Exception):
    """Base exception for all application-specific errors."""
    code = "error"


class ParseFailure(AllwaysError):
    """Raised when a file is not syntactically valid Python."""
    code = "parse_error"

    def __init__(self, file_path: str, message: str, lineno: int = None):
        self.file_path = file_path
        self.message = message
        self.lineno = lineno
        location = f"{file_path}:{lineno}" if lineno else file_path
        super().__init__(f"Failed to parse {location}: {message}")


class MalformedMarkerError(AllwaysError):
    """Raised when the allways start/end marker comments do not pair up."""
    code = "malformed_markers"

    def __init__(self, reason, message: str, file_path: str = "<string>"):
        self.reason = reason
        self.message = message
        self.file_path = file_path
        super().__init__(f"Malformed allways block in {file_path}: {message}")


class FileAccessError(AllwaysError):
    """Raised when a file cannot be read or written."""
    code = "io_error"

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"Cannot access {file_path}: {message}")


class ConfigError(AllwaysError):
    """Raised for configuration-related problems."""
    code = "config_error"

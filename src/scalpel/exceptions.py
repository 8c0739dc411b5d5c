# Custom exceptions for Scalpel

class ScalpelError(Exception):
    """Base exception for all application-specific errors."""
    pass

class InvalidPatternError(ScalpelError):
    """Raised when a search pattern cannot be used (empty pattern)."""
    def __init__(self, message: str = "Search pattern must not be empty"):
        self.message = message
        super().__init__(message)

class AccessDeniedError(ScalpelError):
    """Raised when a path lies outside every allowed directory."""
    def __init__(self, path: str, allowed_directories: list = None):
        self.path = path
        self.allowed_directories = allowed_directories or []
        super().__init__(f"Access denied: {path} is not in allowed directories")

class StorageError(ScalpelError):
    """Raised when a file cannot be read or written."""
    def __init__(self, path: str, operation: str, message: str):
        self.path = path
        self.operation = operation
        self.message = message
        super().__init__(f"Failed to {operation} {path}: {message}")

class BackupError(ScalpelError):
    """Raised when a backup snapshot cannot be created."""
    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Failed to create backup of {path}: {message}")

class FormatError(ScalpelError):
    """Raised when an external formatter fails."""
    def __init__(self, language: str, message: str):
        self.language = language
        self.message = message
        super().__init__(f"Formatter for '{language}' failed: {message}")

class ConfigError(ScalpelError):
    """Raised for configuration-related problems."""
    pass

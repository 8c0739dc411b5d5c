"""
Configuration for exact-match editing.

Contains thresholds, backup naming and formatter configurations.
"""

BACKUP_SUFFIX = ".backup-"

SIMILARITY_THRESHOLDS = {
    "min_score": 0.7,          # A window must score strictly above this
    "min_window_ratio": 0.5,   # Stop scanning when fewer than this share of the pattern remains
}

# File extension -> language hint passed to the formatter
EXTENSION_LANGUAGES = {
    ".py": "python",
    ".js": "babel",
    ".jsx": "babel",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".json": "json",
    ".css": "css",
    ".scss": "scss",
    ".html": "html",
    ".md": "markdown",
    ".yml": "yaml",
    ".yaml": "yaml",
}

# Language hint -> external command reading stdin and writing stdout
FORMATTERS = {
    "python": {
        "command": "black",
        "args": ["--quiet", "-"],
    },
    "babel": {
        "command": "prettier",
        "args": ["--parser", "babel", "--single-quote", "--tab-width", "2", "--trailing-comma", "es5"],
    },
    "typescript": {
        "command": "prettier",
        "args": ["--parser", "typescript", "--single-quote", "--tab-width", "2", "--trailing-comma", "es5"],
    },
    "json": {"command": "prettier", "args": ["--parser", "json"]},
    "css": {"command": "prettier", "args": ["--parser", "css"]},
    "scss": {"command": "prettier", "args": ["--parser", "scss"]},
    "html": {"command": "prettier", "args": ["--parser", "html"]},
    "markdown": {"command": "prettier", "args": ["--parser", "markdown"]},
    "yaml": {"command": "prettier", "args": ["--parser", "yaml"]},
}

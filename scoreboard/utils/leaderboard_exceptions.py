"""
Fatal exceptions for the ranking run with one-line user-facing messages.
"""

class LeaderboardException(Exception):
    """Base exception for ranking errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class MissingArgumentError(LeaderboardException):
    """Raised when an input log path is not supplied on the command line."""
    def __init__(self, label: str):
        self.label = label
        super().__init__(
            f"Missing argument for {label}",
            f"No {label} file was given as an argument."
        )

class SourceNotFoundError(LeaderboardException):
    """Raised when an input log cannot be opened."""
    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Source not found: {path}",
            f"{path} file not found."
        )

class HeaderMismatchError(LeaderboardException):
    """Raised when the first row of a log does not match its schema."""
    def __init__(self, source_name: str, header: str):
        self.source_name = source_name
        self.header = header
        super().__init__(
            f"Unexpected header in {source_name}: {header!r}",
            f"{source_name} file has an invalid header. => {header}"
        )

class MalformedScoreError(LeaderboardException):
    """Raised when a score field is not a signed integer."""
    def __init__(self, text: str, line_number: int = None):
        self.text = text
        self.line_number = line_number
        location = f" at row {line_number}" if line_number is not None else ""
        super().__init__(
            f"Malformed score {text!r}{location}",
            f"Score is not an integer{location}. => {text}"
        )

class MalformedRowError(LeaderboardException):
    """Raised when a data row has a different field count than its header."""
    def __init__(self, source_name: str, line_number: int, expected: int, actual: int):
        self.source_name = source_name
        self.line_number = line_number
        super().__init__(
            f"Row {line_number} of {source_name} has {actual} fields, expected {expected}",
            f"{source_name} row {line_number} has {actual} fields, expected {expected}."
        )

class MalformedSourceError(LeaderboardException):
    """Raised when a log cannot be decoded or parsed as CSV."""
    def __init__(self, path: str, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        super().__init__(
            f"Unreadable source {path} near line {line_number}: {reason}",
            f"{path} file cannot be read near line {line_number}. => {reason}"
        )

"""Custom exceptions for lrcwpm."""

class LrcWpmError(Exception):
    """Base exception for lrcwpm."""
    pass

class ConfigError(LrcWpmError):
    """Invalid configuration values."""
    pass

class ValidationError(LrcWpmError):
    """Invalid input parameters or malformed records."""
    pass

class RecordStoreError(LrcWpmError):
    """Error reading from the lyrics record store."""
    pass

class ReportError(LrcWpmError):
    """Error reading or writing the report file."""
    pass

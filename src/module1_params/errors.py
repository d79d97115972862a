# file: src/module1_params/errors.py

"""
Codec exception hierarchy root.

All codec exceptions inherit from CodecError for unified handling.
"""


class CodecError(Exception):
    """Base exception for all codec errors."""
    pass


class ConfigurationError(CodecError):
    """Raised when block width, error rate or derived data size is invalid."""
    pass

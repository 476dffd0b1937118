"""
Error types for emorand. Every failure is fatal and reported once at the CLI boundary.
"""


class EmorandError(Exception):
    """Base class for all emorand failures"""


class ConfigError(EmorandError):
    """Invalid value in the environment or .env file"""


class CacheDirectoryError(EmorandError):
    """The per-user cache directory could not be determined or created"""


class CacheFileError(EmorandError):
    """The cache file could not be created, opened, read, written or stat'ed"""


class SourceListError(EmorandError):
    """The remote emoji list could not be fetched or contains invalid entries"""


class CacheCorruptedError(EmorandError):
    """The cache file length is zero or not a multiple of the record size"""


class CodepointDecodeError(EmorandError):
    """A stored value is not a Unicode scalar value"""

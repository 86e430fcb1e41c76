"""File hashing with MD5, SHA-1, SHA-256 and SHA-512, a progress-reporting engine and a command line."""

__version__ = "0.1.0"
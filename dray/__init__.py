"""SFTP version 3 protocol messages: request parsing, response encoding and errors."""

__version__ = "0.1.0"
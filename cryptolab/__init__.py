"""Classic and textbook ciphers, stream generators and key-exchange protocols."""

__version__ = "0.1.0"
"""Classical substitution, keyed and transposition ciphers, with a JSON web service."""

__version__ = "0.1.0"
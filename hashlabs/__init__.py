"""Hashing utilities: duplicate-vote detection, a chained price table and image pixel digests."""

__version__ = "0.1.0"
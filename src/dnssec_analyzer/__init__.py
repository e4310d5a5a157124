"""DNSSEC assessment from delv diagnostic output."""

__version__ = "0.1.0"

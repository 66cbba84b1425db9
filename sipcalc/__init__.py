"""SIP calculator backend: projection engine plus a small Flask API."""

__version__ = "0.1.0"

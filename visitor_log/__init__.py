"""Visitor sign-in/sign-out log service."""

__version__ = "0.1.0"

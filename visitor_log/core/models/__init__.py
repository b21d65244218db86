"""Pydantic models for the visitor log: domain entities and API I/O schemas."""

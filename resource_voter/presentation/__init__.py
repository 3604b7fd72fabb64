"""Presentation layer - HTTP integration for FastAPI hosts."""

"""Core module for configuration, exceptions, and logging.

Patterns applied:
- Pydantic Settings with SettingsConfigDict
- Custom namespaced exceptions
- One-time structlog configuration
"""

#!/usr/bin/env python3
"""
Exceptions raised by the simulation core.
"""


class InvalidConfigurationError(ValueError):
    """A construction-time parameter is out of its legal range."""

    def __init__(self, field: str, value, reason: str):
        super().__init__(f"invalid {field}={value!r}: {reason}")
        self.field = field
        self.value = value
        self.reason = reason

from __future__ import annotations

from .models import GenerationError


class PasswordForgeError(Exception):
    pass


class ConfigError(PasswordForgeError):
    pass


class PasswordGenerationError(PasswordForgeError):
    def __init__(self, error: GenerationError) -> None:
        super().__init__(error.message)
        self.error = error

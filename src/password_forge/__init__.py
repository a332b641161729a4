"""Random password generation and strength scoring."""

from .models import GenerationError, GenerationOptions, StrengthResult
from .passwords import build_alphabet, generate_password, require_password
from .strength import score_password

__all__ = [
    "GenerationError",
    "GenerationOptions",
    "StrengthResult",
    "build_alphabet",
    "generate_password",
    "require_password",
    "score_password",
]

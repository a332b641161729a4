from __future__ import annotations

import logging
import secrets
import string
from typing import Callable, Sequence

from .errors import PasswordGenerationError
from .models import GenerationError, GenerationOptions


LOGGER = logging.getLogger(__name__)

UPPERCASE = string.ascii_uppercase
UPPERCASE_REDUCED = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWERCASE = string.ascii_lowercase
LOWERCASE_REDUCED = "abcdefghjkmnpqrstuvwxyz"
DIGITS = string.digits
DIGITS_REDUCED = "23456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
SYMBOLS_REDUCED = "!@#$%^&*"

Chooser = Callable[[Sequence[str]], str]


def build_alphabet(options: GenerationOptions) -> str:
    """Concatenate the enabled class pools in uppercase, lowercase, numbers, symbols order.

    ``exclude_similar`` picks the reduced letter pools, ``exclude_ambiguous`` the
    reduced digit and symbol pools.
    """
    alphabet = ""
    if options.include_uppercase:
        alphabet += UPPERCASE_REDUCED if options.exclude_similar else UPPERCASE
    if options.include_lowercase:
        alphabet += LOWERCASE_REDUCED if options.exclude_similar else LOWERCASE
    if options.include_numbers:
        alphabet += DIGITS_REDUCED if options.exclude_ambiguous else DIGITS
    if options.include_symbols:
        alphabet += SYMBOLS_REDUCED if options.exclude_ambiguous else SYMBOLS
    return alphabet


def generate_password(
    options: GenerationOptions,
    choice: Chooser = secrets.choice,
) -> str | GenerationError:
    """Draw ``options.length`` characters uniformly, with replacement, from the alphabet.

    Returns a :class:`GenerationError` member instead of raising when no class is
    enabled or the length is not positive. Every character is an independent draw,
    so a selected class is not guaranteed to appear in the output.
    """
    alphabet = build_alphabet(options)
    if not alphabet:
        LOGGER.debug("No character class enabled; refusing to generate.")
        return GenerationError.NO_CHARACTER_CLASS_SELECTED
    if options.length < 1:
        LOGGER.debug("Rejected password length %s.", options.length)
        return GenerationError.INVALID_LENGTH
    LOGGER.debug("Generating %d characters from a %d-symbol alphabet.", options.length, len(alphabet))
    return "".join(choice(alphabet) for _ in range(options.length))


def require_password(options: GenerationOptions, choice: Chooser = secrets.choice) -> str:
    result = generate_password(options, choice)
    if isinstance(result, GenerationError):
        raise PasswordGenerationError(result)
    return result

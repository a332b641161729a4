from __future__ import annotations

import hashlib
import logging

import requests


LOGGER = logging.getLogger(__name__)

PWNED_PASSWORDS_RANGE_ENDPOINT = "https://api.pwnedpasswords.com/range/"
USER_AGENT = "password-forge-local"
PREFIX_LENGTH = 5


def split_digest(password: str) -> tuple[str, str]:
    digest = hashlib.sha1(password.encode("utf-8")).hexdigest().upper()
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def parse_range_response(body: str) -> dict[str, int]:
    """Map hash suffixes to breach counts; padding rows carry a count of 0."""
    counts: dict[str, int] = {}
    for row in body.splitlines():
        suffix, sep, count = row.strip().partition(":")
        if not sep or not count.isdigit():
            continue
        counts[suffix.upper()] = int(count)
    return counts


def pwned_password_count(password: str, timeout: int = 15) -> int:
    """Return how often ``password`` appears in the Pwned Passwords corpus.

    Only the hash prefix is sent; the suffix is matched locally.
    """
    prefix, suffix = split_digest(password)
    response = requests.get(
        f"{PWNED_PASSWORDS_RANGE_ENDPOINT}{prefix}",
        headers={"Add-Padding": "true", "User-Agent": USER_AGENT},
        timeout=timeout,
    )
    response.raise_for_status()
    counts = parse_range_response(response.text)
    LOGGER.debug("Range %s returned %d suffixes", prefix, len(counts))
    return counts.get(suffix, 0)

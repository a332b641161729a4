from __future__ import annotations


def prompt_yes_no(question: str, default: bool | None = None) -> bool:
    suffix = " [y/n]: "
    if default is True:
        suffix = " [Y/n]: "
    elif default is False:
        suffix = " [y/N]: "
    while True:
        response = input(question + suffix).strip().lower()
        if not response and default is not None:
            return default
        if response in {"y", "yes"}:
            return True
        if response in {"n", "no"}:
            return False
        print("Please answer y or n.")


def prompt_int(question: str, minimum: int, maximum: int, default: int) -> int:
    if minimum > maximum:
        raise ValueError("minimum must not exceed maximum")
    while True:
        raw = input(f"{question} [{minimum}-{maximum}, default {default}]: ").strip()
        if not raw:
            return default
        if raw.isdigit():
            value = int(raw)
            if minimum <= value <= maximum:
                return value
        print(f"Enter a whole number between {minimum} and {maximum}.")

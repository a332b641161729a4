from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import random
import secrets
from getpass import getpass
from typing import Sequence

import requests

from .breach import pwned_password_count
from .config import (
    breach_settings,
    ensure_config_file,
    generation_options_from_settings,
    length_limits_from_settings,
    load_settings,
)
from .errors import PasswordForgeError, PasswordGenerationError
from .models import GenerationError, GenerationOptions, StrengthResult
from .passwords import Chooser, generate_password, require_password
from .prompts import prompt_int, prompt_yes_no
from .strength import score_password


LOGGER = logging.getLogger(__name__)

BAR_WIDTH = 20
CLASS_FLAGS = (
    ("uppercase", "include_uppercase", "Include uppercase letters"),
    ("lowercase", "include_lowercase", "Include lowercase letters"),
    ("numbers", "include_numbers", "Include digits"),
    ("symbols", "include_symbols", "Include symbols"),
    ("exclude-similar", "exclude_similar", "Drop look-alike letters (I, O, i, l, o)"),
    ("exclude-ambiguous", "exclude_ambiguous", "Drop 0/1 and restrict symbols to !@#$%%^&*"),
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format="%(levelname)s - %(message)s")


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _chooser(seed: int | None) -> Chooser:
    if seed is None:
        return secrets.choice
    LOGGER.warning("Using seeded pseudo-random generator (seed=%s); output is not suitable for real secrets.", seed)
    return random.Random(seed).choice


def _strength_bar(result: StrengthResult) -> str:
    filled = round(result.score / 100 * BAR_WIDTH)
    return f"[{'#' * filled}{'-' * (BAR_WIDTH - filled)}] {result.score:.1f}% {result.label} ({result.color_tag})"


def _options_from_args(args: argparse.Namespace) -> GenerationOptions:
    options = generation_options_from_settings(load_settings())
    overrides = {}
    if args.length is not None:
        overrides["length"] = args.length
    for _, field_name, _ in CLASS_FLAGS:
        value = getattr(args, field_name)
        if value is not None:
            overrides[field_name] = value
    return dataclasses.replace(options, **overrides)


def _cmd_generate(args: argparse.Namespace) -> int:
    options = _options_from_args(args)
    choice = _chooser(args.seed)
    passwords = [require_password(options, choice) for _ in range(args.count)]
    if args.json:
        payload = []
        for password in passwords:
            item = {"password": password}
            if args.show_strength:
                item["strength"] = score_password(password).to_dict()
            payload.append(item)
        print(json.dumps(payload, indent=2))
        return 0
    for password in passwords:
        if args.show_strength:
            print(f"{password}  {_strength_bar(score_password(password))}")
        else:
            print(password)
    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    password = args.password if args.password is not None else getpass("Password to score: ")
    result = score_password(password)
    payload = result.to_dict()

    enabled, timeout = breach_settings(load_settings())
    check_breach = enabled if args.check_breach is None else args.check_breach
    if check_breach:
        try:
            payload["pwned_count"] = pwned_password_count(password, timeout=timeout)
        except requests.RequestException as exc:
            print(f"Breach API unavailable: {exc}")
            return 3

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0
    print(f"Strength: {_strength_bar(result)}")
    print(f"Points: {result.points}/8")
    if "pwned_count" in payload:
        count = payload["pwned_count"]
        if count:
            print(f"Warning: password appears in {count} breach records.")
        else:
            print("Password not found in breach corpus.")
    return 0


def _prompt_classes(options: GenerationOptions) -> GenerationOptions:
    return dataclasses.replace(
        options,
        include_uppercase=prompt_yes_no("Include uppercase letters?", default=options.include_uppercase),
        include_lowercase=prompt_yes_no("Include lowercase letters?", default=options.include_lowercase),
        include_numbers=prompt_yes_no("Include digits?", default=options.include_numbers),
        include_symbols=prompt_yes_no("Include symbols?", default=options.include_symbols),
        exclude_similar=prompt_yes_no("Exclude look-alike letters?", default=options.exclude_similar),
        exclude_ambiguous=prompt_yes_no("Exclude ambiguous digits and symbols?", default=options.exclude_ambiguous),
    )


def _cmd_interactive(_: argparse.Namespace) -> int:
    settings = load_settings()
    options = generation_options_from_settings(settings)
    minimum, maximum = length_limits_from_settings(settings)
    length = prompt_int("Password length", minimum, maximum, min(max(options.length, minimum), maximum))
    options = _prompt_classes(dataclasses.replace(options, length=length))
    while True:
        password = generate_password(options)
        if password is GenerationError.NO_CHARACTER_CLASS_SELECTED:
            print(password.message)
            options = _prompt_classes(dataclasses.replace(options, include_uppercase=True))
            continue
        if isinstance(password, GenerationError):
            raise PasswordGenerationError(password)
        print("")
        print(password)
        print(_strength_bar(score_password(password)))
        if not prompt_yes_no("Generate another?", default=False):
            return 0


def _cmd_init_config(args: argparse.Namespace) -> int:
    path = ensure_config_file(force=args.force)
    print(f"Settings file: {path}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Password Forge - random password generator and strength meter")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    cmd_generate = sub.add_parser("generate", help="Generate one or more passwords")
    cmd_generate.add_argument("--length", type=int, default=None, help="Password length (default from settings)")
    for flag, field_name, help_text in CLASS_FLAGS:
        cmd_generate.add_argument(
            f"--{flag}",
            dest=field_name,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )
    cmd_generate.add_argument("--count", type=_positive_int, default=1, help="Number of passwords to generate")
    cmd_generate.add_argument("--seed", type=int, default=None, help="Seed a pseudo-random generator (testing only)")
    cmd_generate.add_argument("--show-strength", action="store_true", help="Print the strength rating next to each password")
    cmd_generate.add_argument("--json", action="store_true", help="Emit JSON")
    cmd_generate.set_defaults(func=_cmd_generate)

    cmd_score = sub.add_parser("score", help="Rate the strength of a password")
    cmd_score.add_argument("password", nargs="?", default=None, help="Password to score (prompted if omitted)")
    cmd_score.add_argument(
        "--check-breach",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Look the password up in Pwned Passwords (default from settings breach.enabled)",
    )
    cmd_score.add_argument("--json", action="store_true", help="Emit JSON")
    cmd_score.set_defaults(func=_cmd_score)

    cmd_interactive = sub.add_parser("interactive", help="Choose options interactively and generate")
    cmd_interactive.set_defaults(func=_cmd_interactive)

    cmd_init = sub.add_parser("init-config", help="Write the default settings file")
    cmd_init.add_argument("--force", action="store_true", help="Overwrite an existing settings file")
    cmd_init.set_defaults(func=_cmd_init_config)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        return int(args.func(args))
    except PasswordForgeError as exc:
        print(f"Error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

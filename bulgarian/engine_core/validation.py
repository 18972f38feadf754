"""
Configuration Validation - Parsing and checking pile configurations.

A configuration string is a whitespace-separated list of integers, one per
pile. It is valid when:
1. Every token is an integer
2. There is at least one pile and at most card_total piles
3. Every pile holds between 1 and card_total cards
4. The piles add up to exactly card_total

Tokens are ASCII integers with an optional sign; a token with more digits
than card_total cannot be a pile and rejects the whole string. Every token
is consumed, so an over-long list is reported as too many piles
rather than silently truncated.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import re

from .config import BoardConfig, DEFAULT_CONFIG, MAX_FINAL_PILE_COUNT


_INT_TOKEN = re.compile(r"(?P<sign>[+-]?)(?P<digits>[0-9]+)")

MAX_PILE_DIGITS = len(str(MAX_FINAL_PILE_COUNT * (MAX_FINAL_PILE_COUNT + 1) // 2))


class ValidationError(Exception):
    """Raised when a configuration string does not describe a valid board."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid configuration: {'; '.join(errors)}")


class InvariantViolation(Exception):
    """Raised when a board breaks its representation invariant (a bug, not bad input)."""


@dataclass
class ValidationResult:
    """Result of validating a configuration string."""
    valid: bool
    piles: list[int] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def tokenize(text: str, max_digits: int = MAX_PILE_DIGITS) -> list[int] | None:
    """
    Split text into pile sizes.

    Returns None if any token is not an ASCII integer, or has more
    significant digits than max_digits (too large to be a pile).
    """
    piles = []
    for token in text.split():
        match = _INT_TOKEN.fullmatch(token)
        if not match:
            return None
        digits = match.group("digits").lstrip("0") or "0"
        if len(digits) > max_digits:
            return None
        size = int(digits)
        piles.append(-size if match.group("sign") == "-" else size)
    return piles


def configuration_errors(piles: list[int], config: BoardConfig = DEFAULT_CONFIG) -> list[str]:
    """List every way the piles break the board invariants."""
    errors = []
    total = config.card_total

    if not piles:
        errors.append("at least one pile is required")
    elif len(piles) > total:
        errors.append(f"too many piles: {len(piles)} (at most {total})")

    for idx, size in enumerate(piles):
        if size <= 0:
            errors.append(f"pile {idx + 1} has {size} cards; each pile must have at least one card")
        elif size > total:
            errors.append(f"pile {idx + 1} has {size} cards; no pile may exceed {total}")

    if piles and sum(piles) != total:
        errors.append(f"piles total {sum(piles)} cards; the total must be {total}")

    return errors


def is_valid_configuration(piles: list[int], config: BoardConfig = DEFAULT_CONFIG) -> bool:
    """Representation invariant: pile count, pile sizes and total all in range."""
    total = config.card_total
    if not 1 <= len(piles) <= total:
        return False
    if any(size <= 0 or size > total for size in piles):
        return False
    return sum(piles) == total


def validate_config_string(text: str, config: BoardConfig = DEFAULT_CONFIG) -> ValidationResult:
    """
    Validate a configuration string.

    Returns ValidationResult with the parsed piles (empty if the text did
    not tokenize) and the list of problems found.
    """
    piles = tokenize(text, max_digits=len(str(config.card_total)))
    if piles is None:
        return ValidationResult(
            valid=False,
            errors=[
                "configuration must contain only whitespace-separated integers "
                f"no larger than {config.card_total}"
            ],
        )

    errors = configuration_errors(piles, config)
    return ValidationResult(valid=not errors, piles=piles, errors=errors)


def is_valid_config_string(text: str, config: BoardConfig = DEFAULT_CONFIG) -> bool:
    """True iff text describes a valid board for config."""
    return validate_config_string(text, config).valid

import math
import string
import secrets
from dataclasses import dataclass

from pwordgen.config.config_pwordgen import *
from pwordgen.utils.options import PasswordOptions

# Class tags understood by the generator
UPPER = "upper"
LOWER = "lower"
DIGITS = "digits"
SYMBOLS = "symbols"
CUSTOM = "custom"

CLASS_ORDER = (UPPER, LOWER, DIGITS, SYMBOLS, CUSTOM)


class PasswordGenerationError(ValueError):
    """Raised when the requested options cannot produce a password."""


@dataclass(frozen=True)
class OptionsProjection:
    """
    Generator-facing view of `PasswordOptions`.

    The boolean class flags become an explicit set of class tags and
    custom characters count as their own class.
    """
    length: int
    classes: frozenset
    custom_chars: str = ""
    exclude_similar: bool = False
    exclude: str = ""
    require_each_selected_class: bool = True


def project(options: PasswordOptions) -> OptionsProjection:
    """
    Map options onto the generator's input shape.

    Args:
        options: Current option snapshot.

    Returns:
        Projection with one tag per selected class, plus `custom` when
        custom characters were entered.
    """
    classes = set()
    if options.include_upper:
        classes.add(UPPER)
    if options.include_lower:
        classes.add(LOWER)
    if options.include_digits:
        classes.add(DIGITS)
    if options.include_symbols:
        classes.add(SYMBOLS)
    if options.custom_chars:
        classes.add(CUSTOM)

    return OptionsProjection(
        length=options.length,
        classes=frozenset(classes),
        custom_chars=options.custom_chars,
        exclude_similar=options.exclude_similar,
        exclude=options.exclude,
        require_each_selected_class=options.require_each_selected_class,
    )


def character_pools(projection: OptionsProjection) -> dict[str, str]:
    """
    Build the eligible characters for each selected class.

    Exclusions (similar characters and the explicit exclude list) are
    applied to every pool, custom characters included. Pools are returned
    in a fixed class order and may be empty after exclusions.
    """
    base = {
        UPPER: string.ascii_uppercase,
        LOWER: string.ascii_lowercase,
        DIGITS: string.digits,
        SYMBOLS: SYMBOLS_POOL,
        # de-duplicate, keep first occurrence
        CUSTOM: "".join(dict.fromkeys(projection.custom_chars)),
    }

    removed = set(projection.exclude)
    if projection.exclude_similar:
        removed.update(SIMILAR_CHARS)

    pools = {}
    for tag in CLASS_ORDER:
        if tag in projection.classes:
            pools[tag] = "".join(c for c in base[tag] if c not in removed)
    return pools


def _checked_pools(projection: OptionsProjection) -> tuple[dict[str, str], str]:
    """
    Validate the projection and return the per-class pools and their union.

    Raises:
        PasswordGenerationError: If no password can satisfy the projection.
    """
    if not projection.classes:
        raise PasswordGenerationError("Select at least one character type")

    if not LENGTH_MIN <= projection.length <= LENGTH_MAX:
        raise PasswordGenerationError(
            f"Password length must be between {LENGTH_MIN} and {LENGTH_MAX}"
        )

    pools = character_pools(projection)

    if projection.require_each_selected_class:
        emptied = [tag for tag, chars in pools.items() if not chars]
        if emptied:
            raise PasswordGenerationError(
                f"Exclusions remove every character from: {', '.join(emptied)}"
            )
        if projection.length < len(pools):
            raise PasswordGenerationError(
                f"Password length {projection.length} is too short to include "
                f"one character from each of the {len(pools)} selected types"
            )

    all_chars = "".join(dict.fromkeys("".join(pools.values())))
    if not all_chars:
        raise PasswordGenerationError("Exclusions remove every available character")

    return pools, all_chars


def generate_password(projection: OptionsProjection) -> str:
    """
    Generate a random password for the given projection.

    Randomness is provided by the `secrets` module. When every selected
    class is required, one character is drawn from each class before the
    remainder is filled from the combined pool and the result shuffled.

    Args:
        projection: Generator input built by `project`.

    Returns:
        A password of exactly `projection.length` characters.

    Raises:
        PasswordGenerationError: If no class is selected, the length is out
            of range, or exclusions leave nothing to choose from.
    """
    pools, all_chars = _checked_pools(projection)

    # Step 1: Guarantee one of each class
    password = []
    if projection.require_each_selected_class:
        password.extend(secrets.choice(chars) for chars in pools.values())

    # Step 2: Fill the rest randomly
    remaining = projection.length - len(password)
    password.extend(secrets.choice(all_chars) for _ in range(remaining))

    # Step 3: Shuffle all the characters
    secrets.SystemRandom().shuffle(password)
    return "".join(password)


def estimate_entropy_bits(projection: OptionsProjection) -> float:
    """
    Estimate password entropy as length * log2(pool size).

    Raises:
        PasswordGenerationError: Under the same conditions as
            `generate_password`.
    """
    _pools, all_chars = _checked_pools(projection)
    return projection.length * math.log2(len(all_chars))

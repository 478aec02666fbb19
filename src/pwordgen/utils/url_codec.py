"""
Conversion between `PasswordOptions` and URL query strings.

Shared links carry the full option set so a configuration can be
bookmarked or sent to someone else. Encoding is deterministic. Decoding
never raises: unknown keys are ignored and values that cannot be used
fall back to the base record.
"""
import re
from dataclasses import replace
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pwordgen.config.config_pwordgen import LENGTH_MIN, LENGTH_MAX
from pwordgen.utils.options import PasswordOptions, default_options

# Query parameter -> option field, in encoding order
BOOL_PARAMS = {
    "upper": "include_upper",
    "lower": "include_lower",
    "digits": "include_digits",
    "symbols": "include_symbols",
    "excludeSimilar": "exclude_similar",
    "requireEach": "require_each_selected_class",
}
TEXT_PARAMS = {
    "custom": "custom_chars",
    "exclude": "exclude",
}

# Older parameter names still found in shared links
LEGACY_ALIASES = {
    "upper": ("uppercase",),
    "lower": ("lowercase",),
    "requireEach": ("requireEachSelectedClass",),
}


def _bool_str(value: bool) -> str:
    return "true" if value else "false"


def encode(options: PasswordOptions) -> str:
    """
    Serialize options to a query string (without the leading '?').

    `custom` and `exclude` are left out when empty, every other
    parameter is always written.
    """
    params = [
        ("length", str(options.length)),
        ("upper", _bool_str(options.include_upper)),
        ("lower", _bool_str(options.include_lower)),
        ("digits", _bool_str(options.include_digits)),
        ("symbols", _bool_str(options.include_symbols)),
    ]
    if options.custom_chars:
        params.append(("custom", options.custom_chars))
    params.append(("excludeSimilar", _bool_str(options.exclude_similar)))
    if options.exclude:
        params.append(("exclude", options.exclude))
    params.append(("requireEach", _bool_str(options.require_each_selected_class)))
    return urlencode(params)


def _first_values(query: str) -> dict[str, str]:
    # First occurrence of a repeated key wins
    values: dict[str, str] = {}
    for key, value in parse_qsl(query.lstrip("?"), keep_blank_values=True):
        values.setdefault(key, value)
    return values


def _lookup(values: dict[str, str], name: str) -> str | None:
    if name in values:
        return values[name]
    for alias in LEGACY_ALIASES.get(name, ()):
        if alias in values:
            return values[alias]
    return None


def parse_length(value: str) -> int | None:
    """
    Parse a length parameter the way links have always been read.

    Leading whitespace and an optional sign are accepted and parsing stops
    at the first non-digit, so "20abc" reads as 20 and "12.5" as 12.

    Returns:
        The length if it lies within [LENGTH_MIN, LENGTH_MAX], otherwise None.
    """
    match = re.match(r"\s*([+-]?[0-9]+)", value)
    if match is None:
        return None
    length = int(match.group(1))
    if length < LENGTH_MIN or length > LENGTH_MAX:
        return None
    return length


def decode(query: str, base: PasswordOptions | None = None) -> PasswordOptions:
    """
    Build options from a query string.

    Starts from `base` (the default record when omitted) and overlays the
    recognized parameters that are present. A boolean is True only for the
    exact value "true". A length that does not parse or is out of range is
    ignored. Canonical names take precedence over legacy aliases.
    """
    values = _first_values(query or "")
    changes = {}

    if "length" in values:
        length = parse_length(values["length"])
        if length is not None:
            changes["length"] = length

    for name, field_name in BOOL_PARAMS.items():
        raw = _lookup(values, name)
        if raw is not None:
            changes[field_name] = raw == "true"

    for name, field_name in TEXT_PARAMS.items():
        raw = _lookup(values, name)
        if raw is not None:
            changes[field_name] = raw

    return replace(base or default_options(), **changes)


def _split_url(url: str) -> tuple[str, str, str]:
    # Plain split for addresses urlsplit rejects (e.g. an unclosed '[')
    rest, hash_mark, fragment = url.partition("#")
    head, _mark, query = rest.partition("?")
    return head, query, hash_mark + fragment


def query_from_url(url: str) -> str:
    """Return the query component of `url` ('' if it has none)."""
    try:
        return urlsplit(url).query
    except ValueError:
        return _split_url(url)[1]


def url_with_options(url: str, options: PasswordOptions) -> str:
    """Return `url` with its query replaced by the encoded options."""
    query = encode(options)
    try:
        parts = urlsplit(url)
    except ValueError:
        head, _query, fragment = _split_url(url)
        return f"{head}?{query}{fragment}"
    return urlunsplit(parts._replace(query=query))

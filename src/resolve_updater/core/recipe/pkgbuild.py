"""Read-modify-write helpers for PKGBUILD text.

Only a handful of top-level assignments are understood (pkgver, pkgrel and
the sha256sums array). Everything else in the file is left byte-for-byte
untouched.
"""

import re

_SHA256_TOKEN = re.compile(r"(?<![0-9a-fA-F])[0-9a-fA-F]{64}(?![0-9a-fA-F])")
_SHA256_ARRAY = re.compile(r"^sha256sums=\((?P<body>[^)]*)\)", re.MULTILINE)


def _assignment_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(key)}=(?P<value>.*)$", re.MULTILINE)


def read_field(text: str, key: str) -> str | None:
    """Value of the first top-level `key=value` assignment, unquoted.

    >>> read_field("pkgname=foo\\npkgver=18.6\\n", "pkgver")
    '18.6'
    """
    match = _assignment_pattern(key).search(text)
    if match is None:
        return None
    value = match.group("value").strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        value = value[1:-1]
    return value


def set_field(text: str, key: str, value: str) -> str:
    """Replace every top-level `key=...` line with `key=value`.

    Lines for other keys are not modified. If the key is absent the text is
    returned unchanged.
    """
    return _assignment_pattern(key).sub(lambda _: f"{key}={value}", text)


def _checksum_span(text: str) -> tuple[int, int] | None:
    array = _SHA256_ARRAY.search(text)
    if array is None:
        return None
    token = _SHA256_TOKEN.search(array.group("body"))
    if token is None:
        return None
    offset = array.start("body")
    return offset + token.start(), offset + token.end()


def find_checksum_token(text: str) -> str | None:
    """First 64-hex-digit token inside the sha256sums=( ... ) array."""
    span = _checksum_span(text)
    if span is None:
        return None
    return text[span[0] : span[1]]


def replace_checksum_token(text: str, new_hash: str) -> str | None:
    """Swap the first hash in the sha256sums array for new_hash.

    Exactly one token is rewritten; the rest of the text is preserved.

    Returns:
        The updated text, or None when the array holds no 64-digit hash
        (e.g. only SKIP entries) and nothing could be replaced
    """
    span = _checksum_span(text)
    if span is None:
        return None
    start, end = span
    return text[:start] + new_hash + text[end:]

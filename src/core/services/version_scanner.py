"""Version token scanner.

Finds the first `<digits>.<digits>[...]` token in arbitrary text. The caller is
expected to narrow the search window first (anchor phrases), so first-match is
enough and sidesteps copyright years and build numbers.
"""

from __future__ import annotations

import re

# Maximal runs of ASCII digits and dots; everything else is a separator.
_CANDIDATE_RE = re.compile(r"[0-9.]+")
_DIGITS_RE = re.compile(r"[0-9]+")


def _is_version_token(token: str) -> bool:
    if "." not in token:
        return False
    # Components past the second are accepted as-is (e.g. "1.2.3", "2.41.").
    head, _, rest = token.partition(".")
    minor = rest.split(".", 1)[0]
    return bool(_DIGITS_RE.fullmatch(head)) and bool(_DIGITS_RE.fullmatch(minor))


def find_version_token(text: str) -> str | None:
    """Return the first qualifying version token in `text`, or `None`.

    A token qualifies when it is a maximal run of `[0-9.]` containing a dot
    whose first two dot-separated parts are non-empty decimal digits.

    >>> find_version_token("ldd (GNU libc) 2.12")
    '2.12'
    >>> find_version_token("Version .5 or 1.") is None
    True
    """

    for match in _CANDIDATE_RE.finditer(text):
        token = match.group(0)
        if _is_version_token(token):
            return token
    return None

from __future__ import annotations
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# 1-2 prefix letters, exactly six digits, check character (0-9 or A for 10).
# Brackets around the check character are optional and independent of each other.
# No anchors: the first occurrence anywhere in the input is used.
_HKID_PATTERN = re.compile(
    r"""
    ([a-z]{1,2})    # prefix
    ([0-9]{6})      # digits
    \(*             # optional bracket
    ([0-9a])        # check character
    \)*             # optional bracket
    """,
    re.IGNORECASE | re.ASCII | re.VERBOSE,
)


@dataclass(frozen=True)
class HkidParts:
    prefix: str
    digits: str
    check_character: str


def extract_hkid(raw: str) -> HkidParts | None:
    """Return the normalised components of the first HKID-shaped substring, or None."""
    match = _HKID_PATTERN.search(raw)
    if match is None:
        # raw input is personal data, only its length goes to the log
        logger.debug("no HKID pattern found in input of length %d", len(raw))
        return None
    prefix, digits, check = match.groups()
    return HkidParts(prefix=prefix.upper(), digits=digits, check_character=check.upper())

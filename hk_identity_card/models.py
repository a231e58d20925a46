from __future__ import annotations
import logging
from dataclasses import dataclass, field

from .checksum import calculate_check_character
from .extraction import extract_hkid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentityCard:
    """A Hong Kong Identity Card number, parsed and validated on construction.

    Accepts IDs like ``A123456(3)``: a one- or two-letter prefix, six digits
    and a check character. Matching is case-insensitive, the brackets are
    optional and surrounding text is ignored.

    Construction never raises. Absent, malformed and checksum-mismatched input
    all produce a card whose ``is_valid()`` is False.
    """

    raw_input: str | None = None
    prefix: str | None = field(default=None, init=False)
    digits: str | None = field(default=None, init=False)
    check_character: str | None = field(default=None, init=False)
    valid: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.raw_input, str):
            return
        parts = extract_hkid(self.raw_input)
        if parts is None:
            return
        # frozen dataclass: fields are set once here and never again
        object.__setattr__(self, "prefix", parts.prefix)
        object.__setattr__(self, "digits", parts.digits)
        object.__setattr__(self, "check_character", parts.check_character)

        expected = calculate_check_character(parts.prefix, parts.digits)
        if expected != parts.check_character:
            logger.debug("checksum mismatch for HKID with prefix %s", parts.prefix)
            return
        object.__setattr__(self, "valid", True)

    def is_valid(self) -> bool:
        """Return True if the format is correct and the checksum verifies."""
        return self.valid

    def as_string(self) -> str | None:
        """Return the conventional form, e.g. ``A123456(3)``, or None if invalid."""
        if not self.valid:
            return None
        return f"{self.prefix}{self.digits}({self.check_character})"

    def as_string_no_checksum(self) -> str | None:
        """Return the ID without its check character, e.g. ``A123456``, or None if invalid.

        The check character is not officially part of the ID, so some systems
        store IDs in this form.
        """
        if not self.valid:
            return None
        return f"{self.prefix}{self.digits}"

    def __str__(self) -> str:
        return self.as_string() or ""

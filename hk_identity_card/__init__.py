"""hk-identity-card: validate and format Hong Kong Identity Card numbers."""
from .checksum import calculate_check_character, letter_value
from .extraction import HkidParts, extract_hkid
from .models import IdentityCard

__version__ = "0.1.0"

__all__ = [
    "IdentityCard",
    "HkidParts",
    "extract_hkid",
    "calculate_check_character",
    "letter_value",
]

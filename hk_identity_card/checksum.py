from __future__ import annotations

# HKID check character: weighted mod-11 sum over prefix letters and digits.
# Letters map A=1 … Z=26; weights descend so the last digit gets 2
# (7 components: 8..2, 8 components: 9..2). A check value of 10 is written 'A'.
# e.g. A123456: 1*8 + 1*7 + 2*6 + 3*5 + 4*4 + 5*3 + 6*2 = 85 → 11 - 85 % 11 = 3


def letter_value(letter: str) -> int:
    """Return the numeric value of an uppercase prefix letter (A=1 … Z=26)."""
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        raise ValueError(f"not an uppercase ASCII letter: {letter!r}")
    return 1 + ord(letter) - ord("A")


def calculate_check_character(prefix: str, digits: str) -> str:
    """Return the expected check character ('0'-'9' or 'A') for prefix + digits."""
    components = [letter_value(ch) for ch in prefix]
    components.extend(int(ch) for ch in digits)

    total = 0
    for weight, value in zip(range(len(components) + 1, 1, -1), components):
        total += weight * value

    check_digit = (11 - total % 11) % 11
    return "A" if check_digit == 10 else str(check_digit)

"""Answer checks shared by the free-text levels."""
import re

SPECIAL_CHARS = r'[!@#$%^&*(),.?":{}|<>]'

MORSE_CODE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..", " ": " ",
}


def password_checks(password: str) -> dict:
    """Return which of the five strength requirements the password meets."""
    return {
        "length": len(password) >= 8,
        "number": re.search(r"\d", password) is not None,
        "uppercase": re.search(r"[A-Z]", password) is not None,
        "lowercase": re.search(r"[a-z]", password) is not None,
        "special": re.search(SPECIAL_CHARS, password) is not None,
    }


def password_strength(password: str) -> int:
    """Strength on a 0-3 scale: 3 only when every check passes, else half the passed checks."""
    passed = sum(password_checks(password).values())
    return 3 if passed == 5 else passed // 2


def is_strong_password(password: str) -> bool:
    return password_strength(password) == 3


def caesar_cipher(text: str, shift: int, decrypt: bool = False) -> str:
    """Shift ASCII letters by ``shift`` places, keeping case; other characters pass through."""
    shift %= 26
    if decrypt:
        shift = (26 - shift) % 26
    out = []
    for ch in text:
        if "A" <= ch <= "Z":
            out.append(chr((ord(ch) - 65 + shift) % 26 + 65))
        elif "a" <= ch <= "z":
            out.append(chr((ord(ch) - 97 + shift) % 26 + 97))
        else:
            out.append(ch)
    return "".join(out)


def to_morse(text: str) -> str:
    # Unknown characters are kept as-is; a space becomes its own token,
    # so words end up separated by three spaces.
    return " ".join(MORSE_CODE.get(ch, ch) for ch in text.upper())

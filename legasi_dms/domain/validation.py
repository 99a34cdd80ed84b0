"""
Local validation rules - checked before anything is sent to the backend.
"""

import re
from dataclasses import dataclass, asdict
from typing import Dict, List

from legasi_dms.errors import ValidationError

SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
VERIFICATION_CODE_LENGTH = 6

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")
_CODE = re.compile(r"[0-9]{%d}" % VERIFICATION_CODE_LENGTH)


@dataclass(frozen=True)
class PasswordRequirements:
    """Checklist shown next to the new-password field."""
    length: bool
    uppercase: bool
    lowercase: bool
    number: bool
    special_char: bool

    def all_met(self) -> bool:
        return all(asdict(self).values())

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


class PasswordPolicy:
    """
    Password strength rules for new and temporary-password changes.

    A password qualifies when it has at least ``min_length`` characters and
    contains an uppercase letter, a lowercase letter, a digit and one of
    SPECIAL_CHARACTERS.
    """

    def __init__(self, min_length: int = 8, mismatch_message: str = "Passwords do not match"):
        self._min_length = min_length
        self._mismatch_message = mismatch_message

    def requirements(self, password: str) -> PasswordRequirements:
        """Evaluate each requirement independently."""
        return PasswordRequirements(
            length=len(password) >= self._min_length,
            uppercase=bool(_UPPERCASE.search(password)),
            lowercase=bool(_LOWERCASE.search(password)),
            number=bool(_DIGIT.search(password)),
            special_char=bool(_SPECIAL.search(password)),
        )

    def can_submit(self, password: str, confirmation: str) -> bool:
        """Submit is enabled iff every requirement holds and both fields agree."""
        return self.requirements(password).all_met() and password == confirmation

    def problems(self, password: str, confirmation: str) -> List[str]:
        """Itemized list of everything wrong, in display order."""
        checks = self.requirements(password)
        problems = []

        if password != confirmation:
            problems.append(self._mismatch_message)
        if not checks.length:
            problems.append(f"Password must be at least {self._min_length} characters")
        if not checks.uppercase:
            problems.append("Password must contain at least one uppercase letter")
        if not checks.lowercase:
            problems.append("Password must contain at least one lowercase letter")
        if not checks.number:
            problems.append("Password must contain at least one number")
        if not checks.special_char:
            problems.append("Password must contain at least one special character")

        return problems

    def validate(self, password: str, confirmation: str) -> None:
        """
        Raise if the pair cannot be submitted.

        Raises:
            ValidationError: listing every failed rule
        """
        problems = self.problems(password, confirmation)
        if problems:
            raise ValidationError(problems)


def validate_verification_code(code: str) -> str:
    """
    Check an email verification PIN.

    Args:
        code: Code as typed; surrounding whitespace is ignored

    Returns:
        The cleaned six-digit code

    Raises:
        ValidationError: if the code is not exactly six ASCII digits
    """
    cleaned = (code or "").strip()
    if not _CODE.fullmatch(cleaned):
        raise ValidationError(f"PIN must be {VERIFICATION_CODE_LENGTH} digits")
    return cleaned

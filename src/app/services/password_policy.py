"""
Password strength policy

A password is accepted when it meets at least 4 of the 5 requirements.
"""

import re
from typing import Callable, List, NamedTuple

from libs.result import Error

SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
MIN_REQUIREMENTS_MET = 4


class PasswordRequirement(NamedTuple):
    id: str
    label: str
    validator: Callable[[str], bool]


PASSWORD_REQUIREMENTS: List[PasswordRequirement] = [
    PasswordRequirement("length", "8+ characters", lambda p: len(p) >= 8),
    PasswordRequirement("uppercase", "Uppercase letter", lambda p: re.search(r"[A-Z]", p) is not None),
    PasswordRequirement("lowercase", "Lowercase letter", lambda p: re.search(r"[a-z]", p) is not None),
    PasswordRequirement("number", "Number", lambda p: re.search(r"\d", p) is not None),
    PasswordRequirement("special", "Special character", lambda p: any(c in SPECIAL_CHARACTERS for c in p)),
]


class PasswordStrength(NamedTuple):
    is_valid: bool
    score: int
    met: List[str]
    missing: List[str]
    strength: str


def evaluate_password_strength(password: str) -> PasswordStrength:
    met = [req.id for req in PASSWORD_REQUIREMENTS if req.validator(password)]
    missing = [req.label for req in PASSWORD_REQUIREMENTS if req.id not in met]
    score = len(met)

    if score < 2:
        strength = "Weak"
    elif score < MIN_REQUIREMENTS_MET:
        strength = "Medium"
    else:
        strength = "Strong"

    return PasswordStrength(
        is_valid=score >= MIN_REQUIREMENTS_MET,
        score=score,
        met=met,
        missing=missing,
        strength=strength,
    )


def weak_password_error(strength: PasswordStrength) -> Error:
    return Error(
        "WEAK_PASSWORD",
        "Password is too weak. Missing: " + ", ".join(strength.missing),
    )

import re
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class PasswordPolicyValidator:
    """Validates passwords against a configurable security policy.

    Unlike a fail-fast check, ``collect_errors`` reports every violated rule so
    that the credential repository can return them all, in a stable order:
    length, non-alphanumeric, digit, lowercase, uppercase.
    """

    min_length: int = 3
    require_non_alphanumeric: bool = True
    require_digit: bool = True
    require_lowercase: bool = False
    require_uppercase: bool = True

    def collect_errors(self, password: str) -> List[str]:
        errors = []

        if len(password) < self.min_length:
            errors.append(f"Passwords must be at least {self.min_length} characters.")

        if self.require_non_alphanumeric and not re.search(r"[^A-Za-z0-9]", password):
            errors.append("Passwords must have at least one non alphanumeric character.")

        if self.require_digit and not re.search(r"\d", password):
            errors.append("Passwords must have at least one digit ('0'-'9').")

        if self.require_lowercase and not re.search(r"[a-z]", password):
            errors.append("Passwords must have at least one lowercase ('a'-'z').")

        if self.require_uppercase and not re.search(r"[A-Z]", password):
            errors.append("Passwords must have at least one uppercase ('A'-'Z').")

        return errors

"""Tests for PasswordPolicyValidator."""

import pytest

from src.domain.services.auth.password_policy import PasswordPolicyValidator

TOO_SHORT = "Passwords must be at least {n} characters."
NO_SYMBOL = "Passwords must have at least one non alphanumeric character."
NO_DIGIT = "Passwords must have at least one digit ('0'-'9')."
NO_LOWER = "Passwords must have at least one lowercase ('a'-'z')."
NO_UPPER = "Passwords must have at least one uppercase ('A'-'Z')."


class TestPasswordPolicyValidator:
    def test_default_policy_accepts_short_complex_password(self):
        assert PasswordPolicyValidator().collect_errors("P1!") == []

    def test_reports_every_violation_in_order(self):
        policy = PasswordPolicyValidator(min_length=6, require_lowercase=True)

        errors = policy.collect_errors("")

        assert errors == [TOO_SHORT.format(n=6), NO_SYMBOL, NO_DIGIT, NO_LOWER, NO_UPPER]

    @pytest.mark.parametrize(
        "password, expected",
        [
            ("Password1", [NO_SYMBOL]),
            ("Password!", [NO_DIGIT]),
            ("password1!", [NO_UPPER]),
            ("P!", [TOO_SHORT.format(n=3), NO_DIGIT]),
        ],
    )
    def test_single_rule_failures(self, password, expected):
        assert PasswordPolicyValidator().collect_errors(password) == expected

    def test_disabled_rules_are_not_checked(self):
        policy = PasswordPolicyValidator(
            min_length=1,
            require_non_alphanumeric=False,
            require_digit=False,
            require_uppercase=False,
        )

        assert policy.collect_errors("a") == []

    def test_underscore_counts_as_non_alphanumeric(self):
        assert PasswordPolicyValidator().collect_errors("Ab1_") == []

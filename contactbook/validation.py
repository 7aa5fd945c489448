"""
Validation and sanitization of submitted contact fields.

Both are pure functions over a mapping of raw form values keyed by the
form field names (firstName, lastName, emailAddress, notes). Validation
always runs first; sanitize_contact() is only ever called on input that
passed.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Tuple

import nh3

LETTERS_ONLY = re.compile(r"[A-Za-z]+")
EMAIL_SHAPE = re.compile(r"\S+@\S+\.\S+")
STARTS_LOWERCASE = re.compile(r"[a-z]")

FIRST_NAME = "first_name"
LAST_NAME = "last_name"
EMAIL_ADDRESS = "email_address"

MESSAGE_PREFIX = "Please correct the following issues:"

# Clause order here is the order failures are reported in.
FAILURE_CLAUSES = {
    FIRST_NAME: "First name should contain only letters.",
    LAST_NAME: "Last name should contain only letters.",
    EMAIL_ADDRESS: (
        "Email address should start with a lowercase letter "
        "and provide a valid email address."
    ),
}

NOTES_TAGS = {"b", "i", "em", "strong", "a"}
NOTES_ATTRIBUTES = {"a": {"href"}}


@dataclass(frozen=True)
class ValidationResult:
    failures: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def message(self) -> str:
        if not self.failures:
            return ""
        return " ".join([MESSAGE_PREFIX] + [FAILURE_CLAUSES[tag] for tag in self.failures])


def _is_name(value) -> bool:
    return isinstance(value, str) and LETTERS_ONLY.fullmatch(value) is not None


def _is_bad_email(value) -> bool:
    # An empty or missing address is fine: the field is optional.
    if not value:
        return False
    if not isinstance(value, str):
        return True
    return EMAIL_SHAPE.fullmatch(value) is None or STARTS_LOWERCASE.match(value) is None


def validate_contact(data: Mapping) -> ValidationResult:
    """
    Check raw first name, last name and email address.

      • names must be non-empty and ASCII letters only; no digits,
        spaces or punctuation, so whitespace-only values fail too
      • a non-empty email must look like local@domain.tld and start
        with a lowercase letter
    """
    failures = []
    if not _is_name(data.get("firstName")):
        failures.append(FIRST_NAME)
    if not _is_name(data.get("lastName")):
        failures.append(LAST_NAME)
    if _is_bad_email(data.get("emailAddress")):
        failures.append(EMAIL_ADDRESS)
    return ValidationResult(tuple(failures))


def _text(value) -> str:
    # JSON bodies can carry numbers, lists or null; only strings are kept.
    return value.strip() if isinstance(value, str) else ""


def strip_markup(value) -> str:
    """Plain text only: every tag goes, text content stays."""
    return nh3.clean(_text(value), tags=set(), attributes={}).strip()


def clean_notes(value) -> str:
    """Keep b/i/em/strong and a[href]; drop every other tag and attribute."""
    return nh3.clean(
        _text(value),
        tags=NOTES_TAGS,
        attributes=NOTES_ATTRIBUTES,
        link_rel=None,
    ).strip()


def sanitize_contact(data: Mapping) -> dict:
    return {
        "firstName": strip_markup(data.get("firstName")),
        "lastName": strip_markup(data.get("lastName")),
        "emailAddress": strip_markup(data.get("emailAddress")),
        "notes": clean_notes(data.get("notes")),
    }

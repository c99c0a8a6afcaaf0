"""Request body validation as ordered (field, predicate, message) rules."""
import re
from collections.abc import Callable
from typing import Any

from app.core.errors import ValidationFailed

Rule = tuple[str, Callable[[Any], bool], str]

# Simple, practical email format check
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


def is_present(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_optional_text(value: Any) -> bool:
    return value is None or isinstance(value, str)


def is_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_RE.match(value.strip()))


def fits_bcrypt(value: Any) -> bool:
    return isinstance(value, str) and len(value.encode("utf-8")) <= MAX_PASSWORD_BYTES


COURSE_RULES: tuple[Rule, ...] = (
    ("title", is_present, 'Please provide a "title" for the course'),
    ("description", is_present, 'Please provide a "description" for the course'),
    ("estimatedTime", is_optional_text, '"estimatedTime" must be text'),
    ("materialsNeeded", is_optional_text, '"materialsNeeded" must be text'),
)

USER_RULES: tuple[Rule, ...] = (
    ("firstName", is_present, 'Please provide a value for "first name"'),
    ("lastName", is_present, 'Please provide a value for "last name"'),
    ("emailAddress", is_present, 'Please provide a value for "email address"'),
    ("emailAddress", is_email, 'Please enter a valid "email address"'),
    ("password", is_present, 'Please provide a value for "password"'),
    ("password", fits_bcrypt, 'Please provide a "password" of at most 72 bytes'),
)


def validate(payload: dict[str, Any], rules: tuple[Rule, ...]) -> list[str]:
    """Return failure messages in rule order.

    Once a field fails a rule, its later rules are skipped, so a missing email
    reports "provide a value" and not also "enter a valid" address.
    """
    errors: list[str] = []
    failed: set[str] = set()
    for field, predicate, message in rules:
        if field in failed:
            continue
        if not predicate(payload.get(field)):
            failed.add(field)
            errors.append(message)
    return errors


def ensure_valid(payload: dict[str, Any], rules: tuple[Rule, ...]) -> None:
    errors = validate(payload, rules)
    if errors:
        raise ValidationFailed(errors)


def as_object(payload: Any) -> dict[str, Any]:
    """A request body that is not a JSON object is validated as an empty one."""
    return payload if isinstance(payload, dict) else {}


# Primary keys are signed 64-bit integers in every supported database
MIN_RECORD_ID = -(2**63)
MAX_RECORD_ID = 2**63 - 1


def parse_record_id(raw: str) -> int | None:
    """Path id as an int, or None when no row could ever have it."""
    try:
        value = int(raw)
    except ValueError:
        return None
    if not MIN_RECORD_ID <= value <= MAX_RECORD_ID:
        return None
    return value

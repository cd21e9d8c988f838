"""
Field validation and normalization for event and booking writes.

Every check returns a `FieldResult` carrying either the normalized value or an
error message; callers decide when to turn a failure into a `ValidationError`.
The write paths in event_service and booking_service call these explicitly,
in a fixed order, before touching the database.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Mapping, Optional

from eventhub.core.exceptions import ValidationError

REQUIRED_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

REQUIRED_LIST_FIELDS = ("agenda", "tags")

# Column sizes in eventhub.models; description and overview are unbounded Text
FIELD_MAX_LENGTHS = {
    "title": 255,
    "image": 512,
    "venue": 255,
    "location": 255,
    "mode": 50,
    "audience": 255,
    "organizer": 255,
    "email": 320,
}

# Basic local@domain.tld shape, not a full RFC 5322 validator
EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

TIME_REGEX = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)

# Written forms accepted besides ISO 8601
_DATE_FORMATS = (
    "%B %d, %Y",   # November 7, 2025
    "%b %d, %Y",   # Nov 7, 2025
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",    # 7 November 2025
    "%d %b %Y",
    "%m/%d/%Y",    # 11/07/2025
    "%Y/%m/%d",
)


@dataclass(frozen=True)
class FieldResult:
    field: str
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> Any:
        """Return the normalized value, or raise ValidationError."""
        if self.error is not None:
            raise ValidationError(self.error, field=self.field)
        return self.value


def check_required_string(field: str, value: Any) -> FieldResult:
    if not isinstance(value, str) or not value.strip():
        return FieldResult(field, error=f'Field "{field}" is required and cannot be empty')

    value = value.strip()
    max_length = FIELD_MAX_LENGTHS.get(field)
    if max_length is not None and len(value) > max_length:
        return FieldResult(
            field, error=f'Field "{field}" must be at most {max_length} characters'
        )
    return FieldResult(field, value=value)


def check_string_list(field: str, value: Any) -> FieldResult:
    if (
        not isinstance(value, (list, tuple))
        or len(value) == 0
        or not all(isinstance(item, str) for item in value)
    ):
        return FieldResult(
            field, error=f'Field "{field}" is required and must contain at least one item'
        )
    return FieldResult(field, value=list(value))


def generate_slug(title: str) -> str:
    """URL-safe slug: lowercase letters, digits and single hyphens."""
    slug = title.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def _parse_date(raw: str) -> Optional[date]:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass

    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        parsed = None
    if parsed is not None:
        if parsed.tzinfo is not None:
            try:
                parsed = parsed.astimezone(timezone.utc)
            except (ValueError, OverflowError):
                # Shifting to UTC would leave the supported calendar range
                return None
        return parsed.date()

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    return None


def check_date(value: Any) -> FieldResult:
    parsed = _parse_date(value.strip()) if isinstance(value, str) else None
    if parsed is None:
        return FieldResult("date", error="Invalid event date provided")
    return FieldResult("date", value=parsed.isoformat())


def check_time(value: Any) -> FieldResult:
    match = TIME_REGEX.fullmatch(value.strip()) if isinstance(value, str) else None
    if not match:
        return FieldResult("time", error="Time must be in HH:MM format")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return FieldResult("time", error="Time must be a valid 24-hour time")

    return FieldResult("time", value=f"{hours:02d}:{minutes:02d}")


def normalize_date(value: str) -> str:
    return check_date(value).raise_for_error()


def normalize_time(value: str) -> str:
    return check_time(value).raise_for_error()


def check_email(value: Any) -> FieldResult:
    email = value.strip().lower() if isinstance(value, str) else ""
    if not email:
        return FieldResult("email", error="Email is required")
    if not EMAIL_REGEX.match(email):
        return FieldResult("email", error="Email must be a valid email address")
    if len(email) > FIELD_MAX_LENGTHS["email"]:
        return FieldResult(
            "email", error=f'Field "email" must be at most {FIELD_MAX_LENGTHS["email"]} characters'
        )
    return FieldResult("email", value=email)


def prepare_event(fields: Mapping[str, Any], *, title_changed: bool) -> dict:
    """
    Validate and normalize a full set of event fields.

    Steps run in order and stop at the first failure:
    required strings, non-empty lists, slug (only when the title changed),
    date, time. Returns the values to persist.
    """
    prepared: dict = {}

    for field in REQUIRED_STRING_FIELDS:
        prepared[field] = check_required_string(field, fields.get(field)).raise_for_error()

    for field in REQUIRED_LIST_FIELDS:
        prepared[field] = check_string_list(field, fields.get(field)).raise_for_error()

    if title_changed:
        slug = generate_slug(prepared["title"])
        if not slug:
            raise ValidationError(
                'Field "title" must contain at least one letter or digit', field="title"
            )
        prepared["slug"] = slug

    prepared["date"] = check_date(prepared["date"]).raise_for_error()
    prepared["time"] = check_time(prepared["time"]).raise_for_error()

    return prepared

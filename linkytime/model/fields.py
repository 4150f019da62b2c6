# ==============================================
# Field Value Types
# ==============================================
#
# PURPOSE:
#   Validated wrappers around the raw values that make up a
#   meeting entry. A value that exists is a value that passed
#   its constraint, so the rest of the code never re-checks.
#
# WHY THESE CLASSES EXIST:
#   Duplicate detection compares whole MeetingEntry objects by value.
#   That only works if every field compares (and hashes) by value
#   too, including the ones with a canonical form:
#     - "cs2103" and "CS2103" are the same module
#     - "Yes", "y" and "TRUE" are the same recurrence flag
#     - "1.5" and "1.50" are the same duration
#
# CLASSES (all frozen dataclasses):
# ---------------------------------
# - MeetingName      → non-blank text, stored stripped
# - MeetingUrl       → http(s) URL with domain / localhost / IPv4 host
# - MeetingDateTime  → "dd-MM-yyyy HHmm", e.g. "25-12-2021 1400"
# - MeetingDuration  → non-negative decimal number of hours
# - ModuleCode       → alphanumeric, stored upper-cased
# - IsRecurring      → Y/N (yes/no, true/false), stored as bool
# - Tag              → non-blank alphanumeric label, case preserved
#
# Every class offers:
#   - MESSAGE_CONSTRAINTS           → human-readable rule
#   - is_valid(raw) -> bool         (classmethod)
#   - __str__                       → canonical text used for storage
#
# ==============================================

import re
import ipaddress
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar

from linkytime.exceptions import ValidationError


def _require_text(cls: type, raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValidationError(cls.MESSAGE_CONSTRAINTS)
    return raw.strip()


@dataclass(frozen=True)
class MeetingName:
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Meeting names should not be blank"

    value: str

    def __post_init__(self):
        text = _require_text(MeetingName, self.value)
        if not text:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", text)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return isinstance(raw, str) and bool(raw.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MeetingUrl:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "URLs should start with http:// or https:// followed by a valid host "
        "(domain name, localhost or IPv4 address), an optional port and an "
        "optional path, and must not contain spaces"
    )

    URL_PATTERN: ClassVar[re.Pattern] = re.compile(
        r'^https?://'
        r'(?P<host>'
        r'(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}'
        r'|localhost'
        r'|\d{1,3}(?:\.\d{1,3}){3}'
        r')'
        r'(?::\d{1,5})?'
        r'(?:[/?#]\S*)?$',
        re.IGNORECASE | re.ASCII
    )

    value: str

    def __post_init__(self):
        text = _require_text(MeetingUrl, self.value)
        if not self.is_valid(text):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", text)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        if not isinstance(raw, str):
            return False
        match = cls.URL_PATTERN.match(raw.strip())
        if not match:
            return False
        host = match.group("host")
        if host[0].isdigit() and host.replace(".", "").isdigit():
            return cls._is_ip_address(host)
        return True

    @staticmethod
    def _is_ip_address(value: str) -> bool:
        try:
            ipaddress.ip_address(value)
            return True
        except ValueError:
            return False

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MeetingDateTime:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Date and time should be a real calendar date in the format "
        "dd-MM-yyyy HHmm, e.g. 25-12-2021 1400"
    )

    DATETIME_FORMAT: ClassVar[str] = "%d-%m-%Y %H%M"
    SHAPE_PATTERN: ClassVar[re.Pattern] = re.compile(r'^\d{2}-\d{2}-\d{4} \d{4}$', re.ASCII)

    value: datetime

    def __post_init__(self):
        if isinstance(self.value, datetime):
            # Minute precision is all the format can express
            object.__setattr__(self, "value", self.value.replace(second=0, microsecond=0))
            return
        parsed = self._parse(_require_text(MeetingDateTime, self.value))
        if parsed is None:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", parsed)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return isinstance(raw, str) and cls._parse(raw.strip()) is not None

    @classmethod
    def _parse(cls, text: str):
        if not cls.SHAPE_PATTERN.match(text):
            return None
        try:
            return datetime.strptime(text, cls.DATETIME_FORMAT)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value.strftime(self.DATETIME_FORMAT)


@dataclass(frozen=True)
class MeetingDuration:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Duration should be a non-negative number of hours, e.g. 1 or 1.5"
    )

    DURATION_PATTERN: ClassVar[re.Pattern] = re.compile(r'^\d+(?:\.\d+)?$', re.ASCII)

    value: Decimal

    def __post_init__(self):
        if isinstance(self.value, Decimal):
            if not self.value.is_finite() or self.value < 0:
                raise ValidationError(self.MESSAGE_CONSTRAINTS)
            return
        text = _require_text(MeetingDuration, self.value)
        if not self.DURATION_PATTERN.match(text):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        try:
            object.__setattr__(self, "value", Decimal(text))
        except InvalidOperation:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return isinstance(raw, str) and bool(cls.DURATION_PATTERN.match(raw.strip()))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ModuleCode:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Module codes should only contain letters and digits, and should not be blank"
    )

    MODULE_PATTERN: ClassVar[re.Pattern] = re.compile(r'^[A-Za-z0-9]+$')

    value: str

    def __post_init__(self):
        text = _require_text(ModuleCode, self.value)
        if not self.MODULE_PATTERN.match(text):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", text.upper())

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return isinstance(raw, str) and bool(cls.MODULE_PATTERN.match(raw.strip()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IsRecurring:
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Recurrence should be Y or N (yes/no and true/false are also accepted)"
    )

    TRUE_VARIANTS: ClassVar[frozenset] = frozenset({"y", "yes", "true"})
    FALSE_VARIANTS: ClassVar[frozenset] = frozenset({"n", "no", "false"})

    value: bool

    def __post_init__(self):
        if isinstance(self.value, bool):
            return
        text = _require_text(IsRecurring, self.value).lower()
        if text in self.TRUE_VARIANTS:
            object.__setattr__(self, "value", True)
        elif text in self.FALSE_VARIANTS:
            object.__setattr__(self, "value", False)
        else:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        if not isinstance(raw, str):
            return False
        text = raw.strip().lower()
        return text in cls.TRUE_VARIANTS or text in cls.FALSE_VARIANTS

    def __str__(self) -> str:
        return "Y" if self.value else "N"


@dataclass(frozen=True)
class Tag:
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags should be alphanumeric and should not be blank"

    TAG_PATTERN: ClassVar[re.Pattern] = re.compile(r'^[A-Za-z0-9]+$')

    value: str

    def __post_init__(self):
        text = _require_text(Tag, self.value)
        if not self.TAG_PATTERN.match(text):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", text)

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return isinstance(raw, str) and bool(cls.TAG_PATTERN.match(raw.strip()))

    def __str__(self) -> str:
        return self.value

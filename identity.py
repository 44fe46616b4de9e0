import logging
import random
import re
import string
from datetime import datetime

import config
from errors import IdentityExhausted, InvalidFormat, ValidationFailure

logger = logging.getLogger(__name__)

BASE36 = string.digits + string.ascii_uppercase


def to_base36(number):
    if number < 0:
        raise ValueError("base36 requires a non-negative number")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(BASE36[rem])
    return "".join(reversed(digits))


class IdentityPolicy:
    # generate() retries until a candidate is free, then raises IdentityExhausted
    label = "ID"

    def __init__(self, pattern, max_attempts=None):
        self.pattern = re.compile(pattern)
        self.max_attempts = max_attempts or config.IDENTITY_MAX_ATTEMPTS

    def validate(self, candidate):
        if not isinstance(candidate, str) or not candidate:
            raise InvalidFormat(f"{self.label} is required", field=self.label)
        if not self.pattern.fullmatch(candidate):
            raise InvalidFormat(f"Invalid {self.label} format: {candidate}", field=self.label)
        return candidate

    def generate(self, existing):
        taken = set(existing)
        for attempt in range(1, self.max_attempts + 1):
            candidate = self._candidate()
            if candidate not in taken:
                return candidate
            logger.debug("Identity %s taken (attempt %d)", candidate, attempt)
        raise IdentityExhausted(self.label, self.max_attempts)

    def _candidate(self):
        raise NotImplementedError


class RandomNumberPolicy(IdentityPolicy):
    # AST-482, or ARC-2026-417 with_year

    def __init__(self, prefix, digits=3, min_digits=None, with_year=False, rng=None, clock=None,
                 max_attempts=None):
        year_part = r"\d{4}-" if with_year else ""
        min_digits = min_digits or digits
        super().__init__(rf"{re.escape(prefix)}-{year_part}\d{{{min_digits},}}", max_attempts)
        self.label = f"{prefix} ID"
        self.prefix = prefix
        self.digits = digits
        self.with_year = with_year
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    def _candidate(self):
        low = 10 ** (self.digits - 1)
        number = self.rng.randint(low, 10 ** self.digits - 1)
        if self.with_year:
            return f"{self.prefix}-{self.clock().year}-{number}"
        return f"{self.prefix}-{number}"


class TimestampPolicy(IdentityPolicy):
    """``DEPT-K3X9QZ``: tail of the base-36 epoch millis plus a random suffix."""

    def __init__(self, prefix, stamp_length=3, suffix_length=3, rng=None, clock=None, max_attempts=None):
        size = stamp_length + suffix_length
        super().__init__(rf"{re.escape(prefix)}-[0-9A-Z]{{{size}}}", max_attempts)
        self.label = f"{prefix} ID"
        self.prefix = prefix
        self.stamp_length = stamp_length
        self.suffix_length = suffix_length
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now

    def _candidate(self):
        millis = int(self.clock().timestamp() * 1000)
        stamp = to_base36(millis)[-self.stamp_length:].rjust(self.stamp_length, "0")
        suffix = "".join(self.rng.choice(BASE36) for _ in range(self.suffix_length))
        return f"{self.prefix}-{stamp}{suffix}"


class RandomTokenPolicy(IdentityPolicy):
    # BLK-7KQ2M1ZXA

    def __init__(self, prefix, length=9, rng=None, max_attempts=None):
        super().__init__(rf"{re.escape(prefix)}-[0-9A-Z]{{{length}}}", max_attempts)
        self.label = f"{prefix} ID"
        self.prefix = prefix
        self.length = length
        self.rng = rng or random.Random()

    def _candidate(self):
        token = "".join(self.rng.choice(BASE36) for _ in range(self.length))
        return f"{self.prefix}-{token}"


class SequencePolicy(IdentityPolicy):
    # REP-004, one past the highest in use

    def __init__(self, prefix, width=3):
        super().__init__(rf"{re.escape(prefix)}-(\d{{{width},}})")
        self.label = f"{prefix} ID"
        self.prefix = prefix
        self.width = width

    def generate(self, existing):
        highest = 0
        for identity in existing:
            match = self.pattern.fullmatch(identity or "")
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{self.prefix}-{highest + 1:0{self.width}d}"


class FieldPolicy(IdentityPolicy):
    """The caller supplies the key (an email address, for instance)."""

    EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"

    def __init__(self, label, pattern=EMAIL_PATTERN):
        super().__init__(pattern)
        self.label = label

    def generate(self, existing):
        raise ValidationFailure(f"{self.label} must be supplied", field=self.label)

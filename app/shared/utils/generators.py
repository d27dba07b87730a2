"""ID and value generators (CUID primary keys, employee display ids)."""

import re

from cuid2 import cuid_wrapper

from app.shared.utils.datetime import utc_now

cuid_generator = cuid_wrapper()

# cuid2 default: 24 chars, lowercase alphanumeric, first char a letter.
CUID_LENGTH = 24
CUID_PATTERN = re.compile(r"^[a-z][a-z0-9]{" + str(CUID_LENGTH - 1) + r"}$")


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2).

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def is_valid_cuid(value: str | None) -> bool:
    """Return True if value has the fixed-length CUID2 identifier format."""
    return bool(value) and bool(CUID_PATTERN.fullmatch(value))


def generate_employee_display_id() -> str:
    """Return a human-facing employee id, e.g. EMP-20260116-K3Q9ZX."""
    return f"EMP-{utc_now():%Y%m%d}-{generate_cuid()[-6:].upper()}"

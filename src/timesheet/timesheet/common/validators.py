from __future__ import annotations

import re

from ..core.errors import Validation
from ..core.result import Err, Ok, Result
from .datetime_utils import parse_iso_date

_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def require_iso_date(value: object, field_name: str = "Date") -> Result[str, Validation]:
    """Accept only a real calendar day in YYYY-MM-DD form; returns the trimmed string."""
    if not isinstance(value, str) or not _ISO_DATE.match(value.strip()):
        return Err(Validation(f"{field_name} must be in YYYY-MM-DD format"))

    text = value.strip()
    try:
        parse_iso_date(text)
    except ValueError:
        return Err(Validation(f"{field_name} is not a valid calendar date"))
    return Ok(text)

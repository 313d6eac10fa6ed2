"""
Attribute helpers shared by the activities.

- is_valid_name: name-validity check for department and person names
- generate_id: random record identifiers for requests that omit one
"""

import logging
import re
import secrets
import string
from typing import Optional

logger = logging.getLogger(__name__)

# Letters, digits, spaces and the punctuation found in real names
# ("O'Neil", "Smith-Jones", "R&D", "St. Louis"); must start alphanumeric.
VALID_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 .'&-]*$")

ID_ALPHABET = string.ascii_uppercase + string.digits
ID_LENGTH = 5


def is_valid_name(value: Optional[str]) -> bool:
    """Return True when ``value`` is a non-blank, acceptable name.

    Examples:
        >>> is_valid_name("Human Resources")
        True
        >>> is_valid_name("dep@rtment")
        False
    """
    if value is None or not value.strip():
        return False
    return VALID_NAME_PATTERN.match(value.strip()) is not None


def generate_id(length: int = ID_LENGTH) -> str:
    """Generate a random uppercase alphanumeric identifier."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))

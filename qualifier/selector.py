"""
Artifact selection by registration-number parity.

The rule: keep only the decimal digits of the identifier, take the last two
(or the only one), read them as an integer. Odd selects artifact A, even
selects artifact B.

    >>> parity_number("AB1234CD45")
    45
    >>> choose_location("XY0099EF22", "q1.sql", "q2.sql")
    ('B', 'q2.sql')

Artifact locations are either filesystem paths or `resource:<file>` for the
queries packaged under `qualifier/resources/sql`.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Tuple

from qualifier.domain.errors import SelectorError
from qualifier.domain.models import Artifact

RESOURCE_PREFIX = "resource:"
RESOURCE_PACKAGE = "qualifier.resources.sql"


def extract_digits(identifier: str) -> str:
    return "".join(ch for ch in identifier if "0" <= ch <= "9")


def parity_number(identifier: str) -> int:
    digits = extract_digits(identifier)
    if not digits:
        raise SelectorError(f"No digits found in registration number {identifier!r}")
    return int(digits[-2:])


def is_odd(identifier: str) -> bool:
    return parity_number(identifier) % 2 == 1


def choose_location(identifier: str, odd_location: str, even_location: str) -> Tuple[str, str]:
    """Return `(name, location)` of the artifact for `identifier`. No I/O."""
    if is_odd(identifier):
        return "A", odd_location
    return "B", even_location


def read_location(location: str) -> bytes:
    if location.startswith(RESOURCE_PREFIX):
        name = location[len(RESOURCE_PREFIX):]
        return resources.files(RESOURCE_PACKAGE).joinpath(name).read_bytes()
    return Path(location).read_bytes()


def load_artifact(name: str, location: str) -> Artifact:
    """
    Read an artifact's text and trim surrounding whitespace.

    Raises:
        SelectorError: If the location cannot be read or is not UTF-8.
    """
    try:
        content = read_location(location).decode("utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise SelectorError(f"Could not load artifact {name} from {location}: {exc}") from exc
    return Artifact(name=name, location=location, content=content)


def select_artifact(identifier: str, odd_location: str, even_location: str) -> Artifact:
    """
    Pick and load the artifact for `identifier`. Only the chosen one is read.
    """
    name, location = choose_location(identifier, odd_location, even_location)
    return load_artifact(name, location)


__all__ = [
    "RESOURCE_PREFIX",
    "choose_location",
    "extract_digits",
    "is_odd",
    "load_artifact",
    "parity_number",
    "select_artifact",
]

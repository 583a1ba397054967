from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_NAME_RE = re.compile(r'name="([\w\s\-\.]*)"')
_EMAIL_RE = re.compile(r'email="([\w\s\-\.@]*)"')


@dataclass(frozen=True)
class FlatContributor:
    """A contributor known only by one opaque label (a name or an email)."""

    name_or_email: str

    def as_document_value(self) -> str:
        return self.name_or_email


@dataclass(frozen=True)
class ComplexContributor:
    name: str
    email: str

    def as_document_value(self) -> dict[str, Any]:
        return {"name": self.name, "email": self.email}


Contributor = FlatContributor | ComplexContributor


def parse_contributor(token: str) -> Contributor:
    """Turn one list token into a contributor record.

    Parameters
    ----------
    token:
        A single non-empty piece of a `;`-separated authors/maintainers answer.
        Either a plain label (`Antoine Langlois`) or a `name="..."` and/or
        `email="..."` pair (`name="Antoine L",email="email@domain.net"`).

    Returns
    -------
    Contributor
        `ComplexContributor` when both captures are present, otherwise a
        `FlatContributor` holding the name capture, the email capture, or the
        token verbatim (in that order of preference).
    """

    name_match = _NAME_RE.search(token)
    email_match = _EMAIL_RE.search(token)

    if name_match is not None and email_match is not None:
        return ComplexContributor(name=name_match.group(1), email=email_match.group(1))
    if name_match is not None:
        return FlatContributor(name_match.group(1))
    if email_match is not None:
        return FlatContributor(email_match.group(1))
    return FlatContributor(token)

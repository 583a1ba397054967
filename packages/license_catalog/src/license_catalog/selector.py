from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Protocol

from manifest_model.errors import LicenseNotFoundError

DEFAULT_LICENSE_ID = "MIT"


class ChoicePrompter(Protocol):
    def ask_choice(self, prompt: str, options: Sequence[str], default_index: int) -> int:  # pragma: no cover
        raise NotImplementedError


def default_license_index(candidates: Sequence[str]) -> int:
    """Locate the MIT entry in a sorted candidate list.

    The lookup is a binary search, so callers pass the identifiers sorted.
    Raises `LicenseNotFoundError` when the list is empty, holds non-string or
    blank entries, or the search does not land on MIT.
    """

    if not candidates:
        raise LicenseNotFoundError("License candidate list is empty.", code="empty_candidates")
    for idx, item in enumerate(candidates):
        if not isinstance(item, str) or not item.strip():
            raise LicenseNotFoundError(
                f"License candidate {idx} is not a license identifier: {item!r}",
                code="malformed_candidates",
            )
    idx = bisect_left(candidates, DEFAULT_LICENSE_ID)
    if idx >= len(candidates) or candidates[idx] != DEFAULT_LICENSE_ID:
        raise LicenseNotFoundError(
            f"{DEFAULT_LICENSE_ID} license not found",
            code="mit_missing",
            details={"candidates": list(candidates)},
        )
    return idx


def select_license(candidates: Sequence[str], prompter: ChoicePrompter) -> str:
    default_index = default_license_index(candidates)
    chosen = prompter.ask_choice("license", candidates, default_index)
    if not 0 <= chosen < len(candidates):
        raise LicenseNotFoundError(
            f"Selected license index {chosen} is out of range (0..{len(candidates) - 1}).",
            code="selection_out_of_range",
        )
    return candidates[chosen]

from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import LEAVE_SEPARATOR


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee and the raw list of days they were on leave.

    ``leaves`` is kept as written in the source data, e.g. ``"05, 12, 23"``.
    """

    employee_id: int
    name: str
    leaves: str = ""

    def leave_tokens(self) -> frozenset[str]:
        """Trimmed, non-empty leave tokens. Malformed tokens are kept as-is;
        they simply never match a day column."""
        return frozenset(
            token.strip() for token in (self.leaves or "").split(LEAVE_SEPARATOR) if token.strip()
        )

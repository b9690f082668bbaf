from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


def normalise_term(value: Optional[str]) -> str:
    """Trim and case-fold a raw input value; None becomes ''."""
    if value is None:
        return ""
    return str(value).strip().casefold()


@dataclass(frozen=True)
class FilterCriteria:
    """
    The three text filters typed by the user.

    Fields:

    - group_name: substring to look for in the record's group name
    - name: substring to look for in the record's name
    - code: substring to look for in the record's code

    An empty field matches every record. Values are kept as typed;
    call normalised() before comparing against record values.
    """

    group_name: str = ""
    name: str = ""
    code: str = ""

    def normalised(self) -> FilterCriteria:
        return FilterCriteria(
            group_name=normalise_term(self.group_name),
            name=normalise_term(self.name),
            code=normalise_term(self.code),
        )

    @property
    def is_empty(self) -> bool:
        n = self.normalised()
        return not (n.group_name or n.name or n.code)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterCriteria:
        data = data or {}
        return cls(
            group_name=data.get("group_name") or "",
            name=data.get("name") or "",
            code=data.get("code") or "",
        )

"""Data models for readme configuration sections."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

StringOrList = Union[str, Sequence[str]]


@dataclass
class SuppressionItem:
    """Single entry of a Suppression ``directive`` list."""

    suppress: str
    where: StringOrList
    reason: Optional[str] = None
    from_: Optional[StringOrList] = None
    text_matches: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the YAML mapping for this item, omitting unset fields."""
        payload: Dict[str, Any] = {"suppress": self.suppress}
        if self.reason is not None:
            payload["reason"] = self.reason
        payload["where"] = _plain(self.where)
        if self.from_ is not None:
            payload["from"] = _plain(self.from_)
        if self.text_matches is not None:
            payload["text-matches"] = self.text_matches
        return payload


@dataclass
class Suppression:
    """Payload of the code block under the ``Suppression`` heading."""

    directive: List[SuppressionItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"directive": [item.to_dict() for item in self.directive]}


def _plain(value: StringOrList) -> Union[str, List[str]]:
    if isinstance(value, str):
        return value
    return [str(item) for item in value]

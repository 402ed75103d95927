from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

COMPANY_NAME_KEY = "companyName"


@dataclass(frozen=True)
class ProductAnalysis:
    """One company analysis returned by the service.

    ``data`` is the service-owned payload, kept read-only; only the company
    identity is interpreted here.
    """

    company_name: str
    data: Mapping[str, Any] = field(default_factory=dict)
    is_fallback: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))

    def __hash__(self) -> int:
        # identity only; data is an unhashable read-only mapping
        return hash((self.company_name, self.is_fallback))

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.data)
        payload[COMPANY_NAME_KEY] = self.company_name
        if self.is_fallback:
            payload["isFallback"] = True
        return payload

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ProductAnalysis":
        """Rebuild a stored record. Missing identity becomes an empty name."""
        name = raw.get(COMPANY_NAME_KEY)
        return cls(
            company_name=name if isinstance(name, str) else "",
            data={k: v for k, v in raw.items() if k not in (COMPANY_NAME_KEY, "isFallback")},
            is_fallback=bool(raw.get("isFallback", False)),
        )

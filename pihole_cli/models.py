"""
Domain records managed on the appliance.
"""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List


@dataclass
class DNSRecord:
    """Custom DNS host entry. Keyed by domain."""

    domain: str
    ip: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CNAMERecord:
    """CNAME alias. Keyed by domain."""

    domain: str
    target: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Group:
    """Gravity database group."""

    id: int
    enabled: bool
    name: str
    date_added: datetime
    date_modified: datetime
    description: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Group":
        """Build a group from an entry of the ``/api/groups`` response."""
        return cls(
            id=int(data.get("id", 0)),
            enabled=bool(data.get("enabled", False)),
            name=data.get("name", ""),
            date_added=_from_timestamp(data.get("date_added")),
            date_modified=_from_timestamp(data.get("date_modified")),
            description=data.get("comment") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "enabled": self.enabled,
            "name": self.name,
            "date_added": self.date_added.isoformat(),
            "date_modified": self.date_modified.isoformat(),
            "description": self.description,
        }


@dataclass
class GroupCreateRequest:
    name: str
    description: str = ""


@dataclass
class GroupUpdateRequest:
    """Fields left as None are not changed."""

    name: str
    enabled: Optional[bool] = None
    description: Optional[str] = None


@dataclass
class EnableAdBlock:
    """Global ad-blocking toggle."""

    enabled: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DNSRecordList = List[DNSRecord]
CNAMERecordList = List[CNAMERecord]
GroupList = List[Group]


def _from_timestamp(value: Optional[int]) -> datetime:
    return datetime.fromtimestamp(int(value or 0), tz=timezone.utc)

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-12T14:30:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Task:
    id: str
    title: str
    description: str
    created_at: str = field(default_factory=utc_timestamp)

    def to_dict(self) -> dict:
        # Key order is part of the wire format
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "createdAt": self.created_at,
        }

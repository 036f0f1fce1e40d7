"""Shared domain models for taskdns."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional

RECORD_TYPE = "A"
RECORD_TTL = 300


@dataclass(frozen=True)
class ChangeOp:
    """An UPSERT that points one A record at a task IP."""

    name: str
    ip: str
    type: str = RECORD_TYPE
    ttl: int = RECORD_TTL

    def to_change(self) -> Dict[str, Any]:
        return {
            "Action": "UPSERT",
            "ResourceRecordSet": {
                "Name": self.name,
                "Type": self.type,
                "TTL": self.ttl,
                "ResourceRecords": [{"Value": self.ip}],
            },
        }


class ReconcileResult(NamedTuple):
    changes: List[ChangeOp]
    unresolved_orphans: List[str]


@dataclass(frozen=True)
class SyncReport:
    """Outcome of one synchronization run."""

    changes: List[ChangeOp] = field(default_factory=list)
    unresolved_orphans: List[str] = field(default_factory=list)
    change_id: Optional[str] = None
    dry_run: bool = False
    status_code: int = 200

    def as_response(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "changes": len(self.changes),
            "changeId": self.change_id,
            "unresolvedOrphans": list(self.unresolved_orphans),
            "dryRun": self.dry_run,
        }

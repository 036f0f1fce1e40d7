"""Pairing of stale DNS records with task IPs that have no record."""

from collections import deque
from typing import Deque, List, Mapping, Sequence

from .models import ChangeOp, ReconcileResult


def reconcile(task_ips: Sequence[str], record_map: Mapping[str, str]) -> ReconcileResult:
    """Compute the UPSERTs that repoint stale records at orphan task IPs.

    A record is valid when its IP belongs to a live task and invalid otherwise.
    Each valid record claims one occurrence of its IP; the occurrences left
    unclaimed are orphans. Orphans are handed out to invalid records in order,
    first invalid record to first orphan. Orphans left over once the invalid
    records run out are returned as unresolved; invalid records left over are
    not touched. Records are never deleted.
    """
    live = set(task_ips)
    invalid_records: Deque[str] = deque()
    orphans: List[str] = list(task_ips)

    for name, ip in record_map.items():
        if ip in live:
            if ip in orphans:
                orphans.remove(ip)
        else:
            invalid_records.append(name)

    changes: List[ChangeOp] = []
    unresolved: List[str] = []
    for ip in orphans:
        if invalid_records:
            changes.append(ChangeOp(name=invalid_records.popleft(), ip=ip))
        else:
            unresolved.append(ip)

    return ReconcileResult(changes=changes, unresolved_orphans=unresolved)

"""
taskdns - Keep Route 53 A records pointed at live ECS task IPs
"""

__version__ = "0.1.0"

from .core import RecordSynchronizer
from .errors import SyncError
from .reconciler import reconcile

__all__ = ["RecordSynchronizer", "SyncError", "reconcile"]

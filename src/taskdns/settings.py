"""Run settings for taskdns."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .errors_catalog import actionable_error

DEFAULT_LAUNCH_TYPE = "FARGATE"


def _env_bool(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _first_set(environ: Mapping[str, str], *names: str) -> Optional[str]:
    for name in names:
        value = (environ.get(name) or "").strip()
        if value:
            return value
    return None


@dataclass(frozen=True)
class SyncSettings:
    cluster_id: str
    zone_id: str
    region: Optional[str] = None
    launch_type: str = DEFAULT_LAUNCH_TYPE
    dry_run: bool = False

    def __post_init__(self):
        if not self.cluster_id:
            raise ConfigurationError(actionable_error("missing_setting", name="CLUSTER_ID"))
        if not self.zone_id:
            raise ConfigurationError(actionable_error("missing_setting", name="ZONE_ID"))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SyncSettings":
        """Build settings from environment variables.

        CLUSTER_ARN and HOSTED_ZONE_ID are accepted as older spellings of
        CLUSTER_ID and ZONE_ID.
        """
        if environ is None:
            environ = os.environ
        return cls(
            cluster_id=_first_set(environ, "CLUSTER_ID", "CLUSTER_ARN") or "",
            zone_id=_first_set(environ, "ZONE_ID", "HOSTED_ZONE_ID") or "",
            region=_first_set(environ, "AWS_REGION", "AWS_DEFAULT_REGION"),
            launch_type=_first_set(environ, "LAUNCH_TYPE") or DEFAULT_LAUNCH_TYPE,
            dry_run=_env_bool(environ, "DRY_RUN"),
        )

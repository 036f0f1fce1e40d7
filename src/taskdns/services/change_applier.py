"""Route 53 change batch submission."""

from typing import Optional, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from taskdns.errors import UpstreamApplyError
from taskdns.errors_catalog import actionable_error
from taskdns.models import ChangeOp


class ChangeApplier:
    """Sends record UPSERTs to Route 53 as one atomic batch."""

    def __init__(self, route53_client, logger):
        self.route53 = route53_client
        self.logger = logger

    def apply_changes(
        self,
        zone_id: str,
        changes: Sequence[ChangeOp],
        comment: Optional[str] = None,
    ) -> Optional[str]:
        """Submit ``changes`` and return the Route 53 change id.

        Returns None without calling Route 53 when there is nothing to change.
        """
        if not changes:
            return None

        change_batch = {"Changes": [change.to_change() for change in changes]}
        if comment:
            change_batch["Comment"] = comment

        try:
            response = self.route53.change_resource_record_sets(
                HostedZoneId=zone_id,
                ChangeBatch=change_batch,
            )
        except (BotoCoreError, ClientError) as exc:
            raise UpstreamApplyError(
                actionable_error("change_batch_failed", zone=zone_id, error=str(exc))
            ) from exc

        change_id = response.get("ChangeInfo", {}).get("Id")
        self.logger.info(
            "Submitted %s change(s) to %s (change %s, status %s)",
            len(changes),
            zone_id,
            change_id,
            response.get("ChangeInfo", {}).get("Status", "UNKNOWN"),
        )
        return change_id

"""Route 53 record listing service."""

from typing import Dict

from botocore.exceptions import BotoCoreError, ClientError

from taskdns.errors import UpstreamFetchError
from taskdns.errors_catalog import actionable_error
from taskdns.models import RECORD_TYPE


class RecordService:
    """Reads the single-value A records of a hosted zone."""

    def __init__(self, route53_client, logger):
        self.route53 = route53_client
        self.logger = logger

    def list_address_records(self, zone_id: str) -> Dict[str, str]:
        records: Dict[str, str] = {}

        try:
            paginator = self.route53.get_paginator("list_resource_record_sets")
            for page in paginator.paginate(HostedZoneId=zone_id):
                for record_set in page.get("ResourceRecordSets", []):
                    if record_set.get("Type") != RECORD_TYPE:
                        continue

                    name = record_set["Name"]
                    if record_set.get("SetIdentifier"):
                        # Weighted, latency, failover and similar routing policies.
                        self.logger.debug(
                            "Record %s (%s) uses a routing policy. Ignoring it.",
                            name,
                            record_set["SetIdentifier"],
                        )
                        continue

                    values = record_set.get("ResourceRecords") or []
                    if not values:
                        # Alias records carry no values.
                        self.logger.debug("Record %s has no resource records. Ignoring it.", name)
                        continue
                    if len(values) > 1:
                        self.logger.warning(
                            "Record %s has more than one resource record. Ignoring it.", name
                        )
                        continue

                    records[name] = values[0]["Value"]
        except (BotoCoreError, ClientError) as exc:
            raise UpstreamFetchError(
                actionable_error("record_listing_failed", zone=zone_id, error=str(exc))
            ) from exc

        return records

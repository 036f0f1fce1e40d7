"""ECS task inventory service."""

from typing import Any, Dict, Iterable, List

from botocore.exceptions import BotoCoreError, ClientError

from taskdns.errors import UpstreamFetchError
from taskdns.errors_catalog import actionable_error

ENI_ATTACHMENT_TYPE = "ElasticNetworkInterface"
PRIVATE_IP_DETAIL = "privateIPv4Address"
DESCRIBE_BATCH_SIZE = 100


def _chunks(items: List[str], size: int) -> Iterable[List[str]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class TaskIpService:
    """Collects the private IPv4 addresses of the running tasks of a cluster."""

    def __init__(self, ecs_client, logger):
        self.ecs = ecs_client
        self.logger = logger

    def list_task_arns(self, cluster_id: str, launch_type: str) -> List[str]:
        paginator = self.ecs.get_paginator("list_tasks")
        task_arns: List[str] = []
        for page in paginator.paginate(cluster=cluster_id, launchType=launch_type):
            task_arns.extend(page.get("taskArns", []))
        return task_arns

    def describe_tasks(self, cluster_id: str, task_arns: List[str]) -> List[Dict[str, Any]]:
        tasks: List[Dict[str, Any]] = []
        for batch in _chunks(task_arns, DESCRIBE_BATCH_SIZE):
            response = self.ecs.describe_tasks(cluster=cluster_id, tasks=batch)
            for failure in response.get("failures", []):
                self.logger.warning(
                    "Could not describe task %s: %s",
                    failure.get("arn", "<unknown>"),
                    failure.get("reason", "unknown reason"),
                )
            tasks.extend(response.get("tasks", []))
        return tasks

    def list_task_ips(self, cluster_id: str, launch_type: str = "FARGATE") -> List[str]:
        try:
            task_arns = self.list_task_arns(cluster_id, launch_type)
            self.logger.debug("Found %s %s task(s) in %s", len(task_arns), launch_type, cluster_id)
            if not task_arns:
                return []
            tasks = self.describe_tasks(cluster_id, task_arns)
        except (BotoCoreError, ClientError) as exc:
            raise UpstreamFetchError(
                actionable_error("task_listing_failed", cluster=cluster_id, error=str(exc))
            ) from exc

        return [self.private_ip(task) for task in tasks]

    @staticmethod
    def private_ip(task: Dict[str, Any]) -> str:
        task_arn = task.get("taskArn", "<unknown>")
        eni = next(
            (
                attachment
                for attachment in task.get("attachments", [])
                if attachment.get("type") == ENI_ATTACHMENT_TYPE
            ),
            None,
        )
        if eni is None:
            raise UpstreamFetchError(actionable_error("task_without_ip", task=task_arn))

        for detail in eni.get("details", []):
            if detail.get("name") == PRIVATE_IP_DETAIL and detail.get("value"):
                return detail["value"]

        raise UpstreamFetchError(actionable_error("task_without_ip", task=task_arn))

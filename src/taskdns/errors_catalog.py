"""Actionable error catalog for taskdns."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "missing_setting": {
        "what": "Required setting {name} is not set.",
        "next": "Export {name} in the environment or pass it on the command line.",
    },
    "task_listing_failed": {
        "what": "Could not list tasks of cluster {cluster}: {error}",
        "next": "Check the cluster identifier and that the role allows ecs:ListTasks and ecs:DescribeTasks.",
    },
    "task_without_ip": {
        "what": "Task {task} has no private IPv4 address on its network interface attachment.",
        "next": "Make sure the cluster runs tasks in awsvpc network mode.",
    },
    "record_listing_failed": {
        "what": "Could not list records of hosted zone {zone}: {error}",
        "next": "Check the hosted zone id and that the role allows route53:ListResourceRecordSets.",
    },
    "change_batch_failed": {
        "what": "Route 53 rejected the change batch for hosted zone {zone}: {error}",
        "next": "No changes were applied. Fix the cause and wait for the next scheduled run.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"

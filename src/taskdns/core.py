import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Dict, List, Optional, Tuple

import boto3
from rich.console import Console
from rich.table import Table

from .errors import SyncError
from .models import SyncReport
from .reconciler import reconcile
from .services.change_applier import ChangeApplier
from .services.records import RecordService
from .services.task_ips import TaskIpService
from .settings import SyncSettings

console = Console()
logger = logging.getLogger("taskdns")


class RecordSynchronizer:
    """Points the A records of a hosted zone at the live tasks of an ECS cluster."""

    def __init__(
        self,
        settings: SyncSettings,
        ecs_client=None,
        route53_client=None,
        session=None,
    ):
        self.settings = settings

        if ecs_client is None or route53_client is None:
            session = session or boto3.session.Session(region_name=settings.region)
            ecs_client = ecs_client or session.client("ecs")
            route53_client = route53_client or session.client("route53")

        self.task_ip_service = TaskIpService(ecs_client=ecs_client, logger=logger)
        self.record_service = RecordService(route53_client=route53_client, logger=logger)
        self.change_applier = ChangeApplier(route53_client=route53_client, logger=logger)

    def fetch_state(self) -> Tuple[List[str], Dict[str, str]]:
        """Fetch task IPs and zone records concurrently and wait for both.

        The first failure is raised as soon as it happens; the other fetch is
        left to finish in the background and its result is discarded.
        """
        pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="taskdns-fetch")
        try:
            task_ips_future = pool.submit(
                self.task_ip_service.list_task_ips,
                self.settings.cluster_id,
                self.settings.launch_type,
            )
            records_future = pool.submit(
                self.record_service.list_address_records,
                self.settings.zone_id,
            )
            done, _ = wait([task_ips_future, records_future], return_when=FIRST_EXCEPTION)
            for future in done:
                if future.exception() is not None:
                    raise future.exception()
            task_ips = task_ips_future.result()
            record_map = records_future.result()
        finally:
            pool.shutdown(wait=False)

        logger.info(
            "Found %s task IP(s) in %s and %s A record(s) in %s",
            len(task_ips),
            self.settings.cluster_id,
            len(record_map),
            self.settings.zone_id,
        )
        return task_ips, record_map

    def sync(self) -> SyncReport:
        task_ips, record_map = self.fetch_state()
        changes, unresolved_orphans = reconcile(task_ips, record_map)

        for ip in unresolved_orphans:
            logger.warning("Ran out of records! The following IP does not have a host name anymore: %s", ip)

        for change in changes:
            logger.info("%s -> %s", change.name, change.ip)

        change_id: Optional[str] = None
        if not changes:
            logger.info("Records are up to date.")
        elif self.settings.dry_run:
            logger.info("Dry run: %s change(s) not submitted.", len(changes))
        else:
            change_id = self.change_applier.apply_changes(
                self.settings.zone_id,
                changes,
                comment=f"taskdns sync of {self.settings.cluster_id}",
            )

        return SyncReport(
            changes=changes,
            unresolved_orphans=unresolved_orphans,
            change_id=change_id,
            dry_run=self.settings.dry_run,
        )

    def print_report(self, report: SyncReport):
        if report.changes:
            table = Table(title="Record changes" + (" (dry run)" if report.dry_run else ""))
            table.add_column("Record")
            table.add_column("New IP")
            for change in report.changes:
                table.add_row(change.name, change.ip)
            console.print(table)
        else:
            console.print("[green]Records are up to date.[/green]")

        if report.unresolved_orphans:
            console.print(
                f"[yellow]{len(report.unresolved_orphans)} task IP(s) have no record: "
                f"{', '.join(report.unresolved_orphans)}[/yellow]"
            )
        if report.change_id:
            console.print(f"[blue]Submitted change {report.change_id}.[/blue]")

    def run(self) -> int:
        try:
            logger.info("Starting taskdns sync...")
            report = self.sync()
            self.print_report(report)
            return 0
        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1
        except SyncError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return 1
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {exc}")
            logger.exception("Unexpected error")
            return 1

import logging
import os

import click
from rich.logging import RichHandler

from .core import RecordSynchronizer
from .errors import SyncError
from .services.config_loader import ConfigLoader
from .settings import DEFAULT_LAUNCH_TYPE, SyncSettings


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.option(
    "--cluster-id",
    envvar="CLUSTER_ID",
    required=False,
    help="ECS cluster name or ARN whose task IPs are published.",
)
@click.option(
    "--zone-id",
    envvar="ZONE_ID",
    required=False,
    help="Route 53 hosted zone id holding the records to repoint.",
)
@click.option("--region", required=False, help="AWS region (default: boto3 resolution).")
@click.option(
    "--launch-type",
    required=False,
    type=click.Choice(["FARGATE", "EC2", "EXTERNAL"]),
    help="Launch type of the tasks to inspect (default: FARGATE).",
)
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help="Path to a YAML configuration file. Defaults to .taskdns.yml if present.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=None,
    help="Compute and print changes without submitting them to Route 53.",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
def main(cluster_id, zone_id, region, launch_type, config, dry_run, verbose, log_file):
    """Point Route 53 A records at the live tasks of an ECS cluster."""
    logger = logging.getLogger("taskdns")

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), ".taskdns.yml")
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except SyncError as exc:
        raise click.ClickException(str(exc)) from exc

    cluster_id = _resolve_option(cluster_id, config_values, "cluster_id")
    zone_id = _resolve_option(zone_id, config_values, "zone_id")
    region = _resolve_option(region, config_values, "region")
    launch_type = _resolve_option(launch_type, config_values, "launch_type", default=DEFAULT_LAUNCH_TYPE)
    dry_run = bool(_resolve_option(dry_run, config_values, "dry_run", default=False))
    verbose = bool(_resolve_option(verbose, config_values, "verbose", default=False))
    log_file = _resolve_option(log_file, config_values, "log_file")

    if not cluster_id:
        raise click.ClickException("Missing required option '--cluster-id' (or set CLUSTER_ID).")
    if not zone_id:
        raise click.ClickException("Missing required option '--zone-id' (or set ZONE_ID).")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    try:
        settings = SyncSettings(
            cluster_id=cluster_id,
            zone_id=zone_id,
            region=region,
            launch_type=launch_type,
            dry_run=dry_run,
        )
        synchronizer = RecordSynchronizer(settings)
    except SyncError as exc:
        raise click.ClickException(str(exc)) from exc

    raise SystemExit(synchronizer.run())


if __name__ == "__main__":
    main()

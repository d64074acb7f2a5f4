# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from datetime import timedelta
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from reconciler_client.adapters.http_transport import build_http_client
from reconciler_client.adapters.reconciler import Cluster, ReconcilerAPIError, ReconcilerClient
from reconciler_client.config import ConfigurationError, configure_logging, get_reconciler_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    import httpx

    from reconciler_client.config import ReconcilerConfig

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive the cluster reconciler API")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every request at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    apply = subparsers.add_parser("apply", help="Register a desired cluster configuration")
    apply.add_argument(
        "file",
        type=str,
        help="Path to the cluster JSON payload ('-' reads from stdin)",
    )

    delete = subparsers.add_parser("delete", help="Delete a cluster's reconciliation state")
    delete.add_argument("cluster_id", type=str)

    status = subparsers.add_parser("status", help="Show the reconciliation status of a cluster")
    status.add_argument("cluster_id", type=str)
    status.add_argument(
        "--config-version",
        type=int,
        help="Configuration version to inspect (defaults to the latest)",
    )

    changes = subparsers.add_parser("changes", help="List recent status transitions")
    changes.add_argument("cluster_id", type=str)
    window = changes.add_mutually_exclusive_group(required=True)
    window.add_argument(
        "--offset",
        type=str,
        help="Duration to look back, passed verbatim to the service (e.g. 1h, 30m)",
    )
    window.add_argument(
        "--lookback-hours",
        type=float,
        help="Relative look-back window in hours",
    )

    return parser.parse_args(list(argv))


def _load_cluster(source: str) -> Cluster:
    text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    return Cluster.model_validate_json(text)


def _resolve_offset(args: argparse.Namespace) -> str | timedelta:
    if args.offset is not None:
        return args.offset
    hours = args.lookback_hours
    if not math.isfinite(hours) or hours <= 0:
        raise ValueError("Lookback hours must be a positive, finite number")
    try:
        return timedelta(hours=hours)
    except OverflowError as exc:
        raise ValueError(f"Lookback hours out of range: {hours}") from exc


def _open_http_client(config: ReconcilerConfig) -> httpx.Client:
    return build_http_client(config.transport)


def _dispatch(
    client: ReconcilerClient,
    args: argparse.Namespace,
    *,
    cluster: Cluster | None,
    offset: str | timedelta | None,
) -> str | None:
    if args.command == "apply" and cluster is not None:
        state = client.apply_cluster_config(cluster)
        log.info(
            "Registered cluster %s at configuration version %s",
            state.cluster,
            state.configuration_version,
        )
        return state.model_dump_json(by_alias=True, indent=2)
    if args.command == "delete":
        client.delete_cluster(args.cluster_id)
        log.info("Requested deletion of cluster %s", args.cluster_id)
        return None
    if args.command == "status":
        if args.config_version is None:
            state = client.get_latest_cluster(args.cluster_id)
        else:
            state = client.get_cluster(args.cluster_id, args.config_version)
        return state.model_dump_json(by_alias=True, indent=2)
    if args.command == "changes" and offset is not None:
        changes = client.get_status_change(args.cluster_id, offset)
        return json.dumps([change.to_payload() for change in changes], indent=2)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    cluster: Cluster | None = None
    offset: str | timedelta | None = None
    try:
        config = get_reconciler_config()
        if parsed_args.command == "apply":
            cluster = _load_cluster(parsed_args.file)
        elif parsed_args.command == "changes":
            offset = _resolve_offset(parsed_args)
    except (ConfigurationError, OSError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        with _open_http_client(config) as http_client:
            client = ReconcilerClient(http_client, config=config)
            output = _dispatch(client, parsed_args, cluster=cluster, offset=offset)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except ReconcilerAPIError:
        log.exception("Reconciler call failed")
        sys.exit(1)

    if output is not None:
        print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

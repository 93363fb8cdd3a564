"""CLI entry point for the Pinata client."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable

import click
import httpx

from pinata_sdk.client import PinataClient
from pinata_sdk.config import load_config
from pinata_sdk.errors import PinataError
from pinata_sdk.interfaces import PinningAPI
from pinata_sdk.models.config import ClientConfig
from pinata_sdk.models.filters import (
    JobStatus,
    PinJobsFilter,
    PinListFilter,
    PinStatus,
    SortDirection,
)
from pinata_sdk.models.metadata import DELETE, ChangePinMetadata, PinMetadata
from pinata_sdk.models.requests import (
    HashPinPolicy,
    PinByFile,
    PinByHash,
    PinByJson,
    PinOptions,
    Region,
    RegionPolicy,
)

log = logging.getLogger(__name__)


def _require_credentials(cfg: ClientConfig) -> None:
    """Exit with error if the API key pair is not configured."""
    if not cfg.api_key or not cfg.secret_api_key:
        click.echo("Error: No Pinata API key pair configured.", err=True)
        click.echo("Set PINATA_API_KEY and PINATA_SECRET_API_KEY or [pinata] in config.", err=True)
        sys.exit(1)


def _parse_value(raw: str) -> int | float | str:
    """Coerce RAW to a number only when the number prints back as RAW.

    Values such as ``02139``, ``1_000`` or ``infinity`` stay strings.
    """
    for cast in (int, float):
        try:
            value = cast(raw)
        except ValueError:
            continue
        if repr(value) == raw:
            return value
    return raw


def _mask(secret: str) -> str:
    return f"{secret[:4]}***" if len(secret) > 8 else "***"


def _parse_keyvalues(pairs: tuple[str, ...]) -> dict[str, Any]:
    keyvalues: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--kv")
        keyvalues[key] = _parse_value(value)
    return keyvalues


def _metadata(name: str | None, kv: tuple[str, ...]) -> PinMetadata | None:
    if name is None and not kv:
        return None
    return PinMetadata(name=name, keyvalues=_parse_keyvalues(kv))


def _call(ctx: click.Context, op: Callable[[PinningAPI], Awaitable[Any]]) -> Any:
    """Run one API call with a fresh client, exiting 1 on any failure."""
    cfg: ClientConfig = ctx.obj["config"]
    _require_credentials(cfg)

    async def _run() -> Any:
        async with PinataClient.from_config(cfg, transport=ctx.obj.get("transport")) as api:
            return await op(api)

    try:
        return asyncio.run(_run())
    except (PinataError, httpx.HTTPError, OSError, ValueError) as exc:
        log.debug("Command failed", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


def _echo_pinned(pinned) -> None:
    click.echo(f"IPFS hash:  {pinned.ipfs_hash}")
    click.echo(f"Size:       {pinned.pin_size} bytes")
    click.echo(f"Timestamp:  {pinned.timestamp}")


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """pinata - pin content to IPFS through the Pinata API."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg

    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show client configuration."""
    cfg: ClientConfig = ctx.obj["config"]
    click.echo(f"Base URL:   {cfg.base_url}")
    click.echo(f"Timeout:    {cfg.timeout}s")
    click.echo(f"API key:    {_mask(cfg.api_key) if cfg.api_key else '(not set)'}")
    click.echo(f"Secret:     {'***configured***' if cfg.secret_api_key else '(not set)'}")


@cli.command("test-auth")
@click.pass_context
def test_auth(ctx: click.Context) -> None:
    """Check that the configured credentials are accepted."""
    _call(ctx, lambda api: api.test_authentication())
    click.echo("Authentication OK")


@cli.command()
@click.pass_context
def usage(ctx: click.Context) -> None:
    """Show total pinned data for the account."""
    total = _call(ctx, lambda api: api.get_total_user_pinned_data())
    click.echo(f"Pins:                  {total.pin_count}")
    click.echo(f"Size:                  {total.pin_size_total} bytes")
    click.echo(f"Size with replicas:    {total.pin_size_with_replications_total} bytes")


# ── Pinning ────────────────────────────────────────────


@cli.command("pin-file")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--name", default=None, help="Metadata name")
@click.option("--kv", multiple=True, help="Metadata KEY=VALUE (repeatable)")
@click.option("--cid-version", type=click.Choice(["0", "1"]), default=None)
@click.option("--wrap/--no-wrap", default=None, help="Wrap the upload in a directory")
@click.pass_context
def pin_file(
    ctx: click.Context,
    paths: tuple[str, ...],
    name: str | None,
    kv: tuple[str, ...],
    cid_version: str | None,
    wrap: bool | None,
) -> None:
    """Upload and pin files or directories."""
    options = None
    if cid_version is not None or wrap is not None:
        options = PinOptions(
            cid_version=int(cid_version) if cid_version is not None else None,
            wrap_with_directory=wrap,
        )
    request = PinByFile(paths, _metadata(name, kv), options)
    _echo_pinned(_call(ctx, lambda api: api.pin_file(request)))


@cli.command("pin-json")
@click.argument("source", type=click.File("r"))
@click.option("--name", default=None, help="Metadata name")
@click.option("--kv", multiple=True, help="Metadata KEY=VALUE (repeatable)")
@click.pass_context
def pin_json(ctx: click.Context, source, name: str | None, kv: tuple[str, ...]) -> None:
    """Pin the JSON document in SOURCE ('-' for stdin)."""
    try:
        content = json.load(source)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="SOURCE")
    request = PinByJson(content, _metadata(name, kv))
    _echo_pinned(_call(ctx, lambda api: api.pin_json(request)))


@cli.command("pin-hash")
@click.argument("ipfs_hash")
@click.option("--name", default=None, help="Metadata name")
@click.option("--kv", multiple=True, help="Metadata KEY=VALUE (repeatable)")
@click.option("--host-node", multiple=True, help="Multiaddr of a node holding the content")
@click.pass_context
def pin_hash(
    ctx: click.Context,
    ipfs_hash: str,
    name: str | None,
    kv: tuple[str, ...],
    host_node: tuple[str, ...],
) -> None:
    """Queue an existing IPFS hash for pinning."""
    options = PinOptions(host_nodes=list(host_node)) if host_node else None
    request = PinByHash(ipfs_hash, _metadata(name, kv), options)
    job = _call(ctx, lambda api: api.pin_by_hash(request))
    click.echo(f"Job:        {job.id}")
    click.echo(f"IPFS hash:  {job.ipfs_hash}")
    click.echo(f"Status:     {job.status.value}")


@cli.command()
@click.argument("ipfs_hash")
@click.pass_context
def unpin(ctx: click.Context, ipfs_hash: str) -> None:
    """Unpin IPFS_HASH."""
    _call(ctx, lambda api: api.unpin(ipfs_hash))
    click.echo(f"Unpinned {ipfs_hash}")


@cli.command("set-metadata")
@click.argument("ipfs_hash")
@click.option("--name", default=None, help="New metadata name")
@click.option("--kv", multiple=True, help="Set KEY=VALUE (repeatable)")
@click.option("--delete", "delete_keys", multiple=True, help="Remove KEY (repeatable)")
@click.pass_context
def set_metadata(
    ctx: click.Context,
    ipfs_hash: str,
    name: str | None,
    kv: tuple[str, ...],
    delete_keys: tuple[str, ...],
) -> None:
    """Change name and key/values of pinned content."""
    keyvalues: dict[str, Any] = _parse_keyvalues(kv)
    keyvalues.update({key: DELETE for key in delete_keys})
    change = ChangePinMetadata(ipfs_hash, PinMetadata(name=name, keyvalues=keyvalues))
    _call(ctx, lambda api: api.change_hash_metadata(change))
    click.echo(f"Metadata updated for {ipfs_hash}")


@cli.command("set-policy")
@click.argument("ipfs_hash")
@click.option("--region", "regions", multiple=True, required=True,
              help="REGION=COUNT, e.g. FRA1=1 (repeatable)")
@click.pass_context
def set_policy(ctx: click.Context, ipfs_hash: str, regions: tuple[str, ...]) -> None:
    """Change the replication policy of IPFS_HASH."""
    policies = []
    for entry in regions:
        region, _, count = entry.partition("=")
        try:
            policies.append(RegionPolicy(Region(region.upper()), int(count)))
        except ValueError:
            raise click.BadParameter(f"expected REGION=COUNT, got {entry!r}", param_hint="--region")
    _call(ctx, lambda api: api.set_hash_pin_policy(HashPinPolicy(ipfs_hash, policies)))
    click.echo(f"Pin policy updated for {ipfs_hash}")


# ── Listing ────────────────────────────────────────────


@cli.command()
@click.option("--sort", type=click.Choice([d.value for d in SortDirection]), default=None)
@click.option("--status", "job_status", type=click.Choice([s.value for s in JobStatus]), default=None)
@click.option("--hash", "ipfs_hash", default=None, help="Only jobs for this hash")
@click.option("--limit", type=int, default=None)
@click.option("--offset", type=int, default=None)
@click.pass_context
def jobs(
    ctx: click.Context,
    sort: str | None,
    job_status: str | None,
    ipfs_hash: str | None,
    limit: int | None,
    offset: int | None,
) -> None:
    """List queued pin-by-hash jobs."""
    filters = PinJobsFilter(
        sort=SortDirection(sort) if sort else None,
        status=JobStatus(job_status) if job_status else None,
        ipfs_pin_hash=ipfs_hash,
        limit=limit,
        offset=offset,
    )
    result = _call(ctx, lambda api: api.get_pin_jobs(filters))
    click.echo(f"{result.count} job(s)")
    for job in result.rows:
        click.echo(f"  [{job.status.value:15s}] {job.ipfs_pin_hash} queued={job.date_queued} "
                   f"name={job.name or '-'}")


@cli.command("list")
@click.option("--hash-contains", default=None)
@click.option("--status", "pin_status", type=click.Choice([s.value for s in PinStatus]), default=None)
@click.option("--name", default=None, help="Metadata name")
@click.option("--limit", type=int, default=None)
@click.option("--offset", type=int, default=None)
@click.pass_context
def list_pins(
    ctx: click.Context,
    hash_contains: str | None,
    pin_status: str | None,
    name: str | None,
    limit: int | None,
    offset: int | None,
) -> None:
    """List pinned content."""
    filters = PinListFilter(
        hash_contains=hash_contains,
        status=PinStatus(pin_status) if pin_status else None,
        metadata_name=name,
        page_limit=limit,
        page_offset=offset,
    )
    result = _call(ctx, lambda api: api.get_pin_list(filters))
    click.echo(f"{result.count} pin(s)")
    for item in result.rows:
        click.echo(f"  {item.ipfs_pin_hash} size={item.size} pinned={item.date_pinned} "
                   f"name={item.metadata.name or '-'}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()

"""
ACIS Locator — CLI entrypoint.

Usage:
    acis-locate --help
    acis-locate locate --component PHLV5 --format cmake
    acis-locate paths
    acis-locate config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from acis_locator import __version__
from acis_locator.core.observability.logging_config import configure_logging

_PLATFORMS = click.Choice(["windows", "linux", "macos"], case_sensitive=False)


@click.group()
@click.version_option(version=__version__, prog_name="acis-locate")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to locator.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """ACIS Locator — find an installed ACIS toolkit for your build."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    configure_logging(debug=debug, verbose=verbose, quiet=quiet)


def _search_options(func):
    """Options that decide where a lookup searches."""
    func = click.option("--toolkit", default=None,
                        help="Toolkit name or path to a toolkit.yml.")(func)
    func = click.option("--root", default=None, type=click.Path(file_okay=False),
                        help="Explicit toolkit install root (searched first).")(func)
    return func


def _lookup_options(func):
    """Options shared by every command that runs a lookup."""
    func = click.option("--platform", "platform_name", type=_PLATFORMS, default=None,
                        help="Resolve for this platform instead of the host.")(func)
    func = click.option("--arch", default=None, help="Explicit architecture tag.")(func)
    return _search_options(func)


@cli.command()
@_lookup_options
@click.option("--component", "-C", "components", multiple=True,
              help="Optional component to look for (repeatable).")
@click.option("--require-component", "required_components", multiple=True,
              help="Component whose absence fails the lookup (repeatable).")
@click.option("--required", is_flag=True, default=False,
              help="Exit 1 when the toolkit is not found.")
@click.option("--format", "fmt", type=click.Choice(["text", "json", "env", "cmake"]),
              default="text", help="Output format.")
@click.pass_context
def locate(
    ctx: click.Context,
    root: str | None,
    toolkit: str | None,
    arch: str | None,
    platform_name: str | None,
    components: tuple[str, ...],
    required_components: tuple[str, ...],
    required: bool,
    fmt: str,
) -> None:
    """Locate the toolkit headers, libraries and redistributables."""
    from acis_locator.core.errors import ToolkitNotFoundError
    from acis_locator.core.services.export import render
    from acis_locator.core.use_cases.locate import run_locate

    try:
        run = run_locate(
            config_path=ctx.obj.get("config_path"),
            toolkit=toolkit,
            root=root,
            components=list(components),
            required_components=list(required_components),
            arch=arch,
            platform=platform_name,
            required=True if required else None,
        )
    except ToolkitNotFoundError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if run.error:
        if fmt == "json":
            click.echo(json.dumps({"error": run.error}, indent=2))
            return
        click.secho(f"❌ {run.error}", fg="red", err=True)
        sys.exit(1)

    result = run.result
    assert result is not None  # guaranteed after error check above

    if fmt != "text":
        click.echo(render(result, fmt), nl=False)
        return

    quiet = ctx.obj.get("quiet", False)
    prefix = result.prefix

    if not result.found:
        click.secho(f"❌ {result.failure_message}", fg="red")
        if not quiet and result.search_groups:
            click.echo("   Searched:")
            for group in result.search_groups:
                for path in group.paths:
                    click.echo(f"     • {path}  ({group.source})")
        return

    click.secho(f"✅ Found {prefix}", fg="green", bold=True)
    click.echo(f"   Root:      {result.root_dir}")
    click.echo(f"   Include:   {result.include_dir}  ({result.include_source})")
    click.echo(f"   Arch:      {result.version_string}  ({result.arch.source if result.arch else '-'})")
    lib = result.library
    if lib is not None:
        click.echo(f"   Release:   {lib.release or '-'}")
        click.echo(f"   Debug:     {lib.debug or '-'}")
    click.echo(f"   Redist:    {result.redist_release or '-'}")
    if result.redist_debug != result.redist_release:
        click.echo(f"   Redist(d): {result.redist_debug or '-'}")

    if result.components:
        click.echo()
        click.secho(f"   Components: {len(result.found_components)}/{len(result.components)}",
                    fg="white", bold=True)
        for name, comp in result.components.items():
            if comp.found:
                click.echo(f"     • {name} ✓  → {comp.library}")
            elif not comp.known:
                click.secho(f"     • {name} (unknown component)", fg="yellow")
            else:
                click.secho(f"     • {name} ✗", fg="yellow")

    if result.shadowed_headers and not quiet:
        click.echo()
        click.secho("⚠️  Other installations ignored:", fg="yellow")
        for path in result.shadowed_headers:
            click.echo(f"   • {path}")

    click.echo()


@cli.command()
@_search_options
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def paths(
    ctx: click.Context,
    root: str | None,
    toolkit: str | None,
    as_json: bool,
) -> None:
    """Show the ordered search paths."""
    from acis_locator.core.services.search_paths import build_search_groups
    from acis_locator.core.use_cases.locate import prepare_request

    run = prepare_request(ctx.obj.get("config_path"), toolkit=toolkit, root=root)
    if run.error or run.request is None:
        if as_json:
            click.echo(json.dumps({"error": run.error}, indent=2))
            return
        click.secho(f"❌ {run.error}", fg="red", err=True)
        sys.exit(1)

    request = run.request
    groups = build_search_groups(request.toolkit, request.root, request.environ)

    if as_json:
        click.echo(json.dumps([g.to_dict() for g in groups], indent=2))
        return

    if not groups:
        click.secho("No search paths (set --root or the install variable).", fg="yellow")
        return

    for index, group in enumerate(groups, start=1):
        click.secho(f"{index}. {group.source} [{group.origin}]", bold=True)
        for path in group.paths:
            click.echo(f"     {path}")


@cli.command("arch")
@_lookup_options
@click.pass_context
def arch_cmd(
    ctx: click.Context,
    root: str | None,
    toolkit: str | None,
    arch: str | None,
    platform_name: str | None,
) -> None:
    """Show the architecture tag of the installation."""
    from acis_locator.core.use_cases.locate import run_locate

    run = run_locate(
        ctx.obj.get("config_path"), toolkit=toolkit, root=root, arch=arch, platform=platform_name,
        required=False,
    )
    if run.error:
        click.secho(f"❌ {run.error}", fg="red", err=True)
        sys.exit(1)

    result = run.result
    assert result is not None
    if result.arch is None:
        click.secho("❌ Architecture unknown (toolkit headers not found)", fg="red", err=True)
        sys.exit(1)
    click.echo(f"{result.arch.value}  ({result.arch.source})")


@cli.command()
@click.pass_context
def toolkits(ctx: click.Context) -> None:
    """List available toolkit descriptors."""
    from acis_locator.core.config.loader import ConfigError, load_config_or_default
    from acis_locator.core.config.toolkit_loader import available_toolkits

    try:
        config, _ = load_config_or_default(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    found = available_toolkits(Path(config.toolkits_dir) if config.toolkits_dir else None)
    for name, descriptor in found.items():
        click.secho(f"• {name}", fg="cyan", bold=True, nl=False)
        if descriptor.description:
            click.echo(f" — {descriptor.description}", nl=False)
        click.echo()
        if descriptor.components:
            click.echo(f"    components: {', '.join(descriptor.component_names)}")


@cli.group()
def config() -> None:
    """Locator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate locator.yml configuration."""
    from acis_locator.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Toolkit: {result.toolkit_name}")
        click.echo(f"   Components: {', '.join(result.config.components) or 'none'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()

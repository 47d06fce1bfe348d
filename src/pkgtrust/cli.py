#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""pkgtrust command-line interface entrypoint."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub

from pkgtrust import __version__

# Import all commands at module level
from pkgtrust.commands.check import check_command
from pkgtrust.commands.history import history_group
from pkgtrust.commands.keys import key_group
from pkgtrust.config import PkgTrustConfig, PkgTrustRuntimeConfig, set_pkgtrust_config
from pkgtrust.console import get_command_logger


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="pkgtrust",
    message="%(prog)s version %(version)s",
)
@click.option(
    "--installroot",
    type=click.Path(file_okay=False, resolve_path=True),
    default=None,
    help="Root directory of the rpm database (default: PKGTRUST_INSTALLROOT or /).",
)
@click.pass_context
def cli(ctx: click.Context, installroot: str | None) -> None:
    """Package signature verification and trusted key management.

    Configure via environment variables:
    - PKGTRUST_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - PKGTRUST_INSTALLROOT: Root of the rpm database
    - PKGTRUST_LOCALPKG_GPGCHECK: Check signatures of local package files
    - PKGTRUST_GPGCHECK: Default gpgcheck for repositories
    - PKGTRUST_HISTORY_DB: Location of the transaction history database
    """
    ctx.ensure_object(dict)

    # Invalid values raise ConfigError from converters or ValueError from type parsing
    try:
        runtime_config = PkgTrustRuntimeConfig.from_env()
        config = PkgTrustConfig.from_env()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name="pkgtrust",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )
    get_hub().initialize_foundation(telemetry_config)

    if installroot:
        config = evolve(config, trust=evolve(config.trust, installroot=installroot))
    set_pkgtrust_config(config)

    ctx.obj["config"] = config
    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["log"] = get_command_logger("cli")


# Register simple commands
cli.add_command(check_command, name="check")

# Register command groups
cli.add_command(key_group, name="key")
cli.add_command(history_group, name="history")

main = cli

if __name__ == "__main__":
    cli()

# 🔑📦🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Check command for the pkgtrust CLI."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation.console import perr, pout

from pkgtrust.config import PkgTrustConfig
from pkgtrust.console import get_command_logger
from pkgtrust.exceptions import SignatureCheckError
from pkgtrust.package import get_signature_checker
from pkgtrust.repo import Package, Repo
from pkgtrust.signature.classifier import CheckResult

RESULT_MESSAGES = {
    CheckResult.OK: "✅ signature OK",
    CheckResult.FAILED: "❌ signature verification failed",
    CheckResult.FAILED_NOT_TRUSTED: "❌ signed with a key that is not trusted",
    CheckResult.FAILED_KEY_MISSING: "❌ public key is not installed",
    CheckResult.FAILED_NOT_SIGNED: "❌ package is not signed",
}


@click.command("check")
@click.argument(
    "packages",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--repo",
    "repo_id",
    default=None,
    help="Treat the packages as coming from this repository instead of the command line.",
)
@click.option(
    "--gpgcheck/--no-gpgcheck",
    default=None,
    help="Override gpgcheck (with --repo) or localpkg_gpgcheck (without).",
)
@click.pass_context
def check_command(ctx: click.Context, packages: tuple[str, ...], repo_id: str | None, gpgcheck: bool | None) -> None:
    """Checks the signatures of package files."""
    log = get_command_logger("check")
    config: PkgTrustConfig = ctx.obj["config"]
    log.debug("Checking package signatures", packages=list(packages), repo=repo_id, gpgcheck=gpgcheck)

    if repo_id:
        repo = Repo(id=repo_id, gpgcheck=config.trust.gpgcheck if gpgcheck is None else gpgcheck)
    else:
        repo = Repo.commandline()
        if gpgcheck is not None:
            config = evolve(config, trust=evolve(config.trust, localpkg_gpgcheck=gpgcheck))

    checker = get_signature_checker(config)
    failures = 0
    missing_key = False
    for package_file in packages:
        package = Package(path=package_file, repo=repo)
        try:
            result = checker.check_package_signature(package)
        except SignatureCheckError as e:
            log.error("Signature check could not run", error=str(e), package=package_file)
            perr(f"❌ {e}")
            raise click.Abort() from e

        log.debug("Signature check result", package=package_file, result=result.name)
        pout(f"{package_file}: {RESULT_MESSAGES[result]}")
        if not result.is_ok:
            failures += 1
            missing_key = missing_key or result is CheckResult.FAILED_KEY_MISSING

    if missing_key:
        pout("💡 Import the signing key with 'pkgtrust key import <key-url>' and check again.")
    if failures:
        perr(f"\n❌ {failures} of {len(packages)} package(s) failed the signature check")
        ctx.exit(1)


# 🔑📦🔚

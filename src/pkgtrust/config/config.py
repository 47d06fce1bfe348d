#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Typed pkgtrust configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from attrs import define
from attrs import field as attrs_field
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig
from provide.foundation.parsers import parse_bool

from pkgtrust.config.defaults import (
    DEFAULT_DOWNLOAD_RETRIES,
    DEFAULT_DOWNLOAD_TIMEOUT,
    DEFAULT_GPGCHECK,
    DEFAULT_INSTALLROOT,
    DEFAULT_LOCALPKG_GPGCHECK,
    DEFAULT_RPM_BIN,
    DEFAULT_RPMKEYS_BIN,
    DEFAULT_USER_AGENT,
    HISTORY_DB_RELPATH,
)
from pkgtrust.exceptions import ConfigError


def _non_negative_int(value: str | int) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise ConfigError(f"Invalid integer value: {value!r}", value=value) from e
    if number < 0:
        raise ConfigError(f"Value must not be negative: {value!r}", value=value)
    return number


def _positive_float(value: str | float) -> float:
    try:
        number = float(value)
    except ValueError as e:
        raise ConfigError(f"Invalid number: {value!r}", value=value) from e
    if number <= 0:
        raise ConfigError(f"Value must be positive: {value!r}", value=value)
    return number


@define
class TrustConfig(RuntimeConfig):
    """Signature checking switches and the install root."""

    installroot: str = field(
        default=DEFAULT_INSTALLROOT,
        env_var="PKGTRUST_INSTALLROOT",
        metadata={"help": "Root directory of the rpm database used for verification"},
    )
    localpkg_gpgcheck: bool = field(
        default=DEFAULT_LOCALPKG_GPGCHECK,
        env_var="PKGTRUST_LOCALPKG_GPGCHECK",
        converter=parse_bool,
        metadata={"help": "Check signatures of packages given on the command line"},
    )
    gpgcheck: bool = field(
        default=DEFAULT_GPGCHECK,
        env_var="PKGTRUST_GPGCHECK",
        converter=parse_bool,
        metadata={"help": "Default gpgcheck value for repositories"},
    )


@define
class DownloadConfig(RuntimeConfig):
    """HTTP settings used when fetching remote keys."""

    timeout: float = field(
        default=DEFAULT_DOWNLOAD_TIMEOUT,
        env_var="PKGTRUST_DOWNLOAD_TIMEOUT",
        converter=_positive_float,
    )
    retries: int = field(
        default=DEFAULT_DOWNLOAD_RETRIES,
        env_var="PKGTRUST_DOWNLOAD_RETRIES",
        converter=_non_negative_int,
    )
    user_agent: str = field(default=DEFAULT_USER_AGENT, env_var="PKGTRUST_USER_AGENT")


@define
class EngineConfig(RuntimeConfig):
    """Executables driven by the rpm command-line engine."""

    rpmkeys: str = field(default=DEFAULT_RPMKEYS_BIN, env_var="PKGTRUST_RPMKEYS")
    rpm: str = field(default=DEFAULT_RPM_BIN, env_var="PKGTRUST_RPM")


@define
class HistoryConfig(RuntimeConfig):
    """Location of the transaction history database."""

    database: str | None = field(default=None, env_var="PKGTRUST_HISTORY_DB")

    def database_path(self, installroot: str) -> Path:
        """Resolve the database path, defaulting under the install root."""
        if self.database:
            return Path(self.database)
        return Path(installroot) / HISTORY_DB_RELPATH


@define
class PkgTrustConfig:
    """Complete pkgtrust configuration."""

    trust: TrustConfig = attrs_field(factory=TrustConfig)
    download: DownloadConfig = attrs_field(factory=DownloadConfig)
    engine: EngineConfig = attrs_field(factory=EngineConfig)
    history: HistoryConfig = attrs_field(factory=HistoryConfig)

    @classmethod
    def from_env(cls) -> Self:
        """Load every section from the environment."""
        return cls(
            trust=TrustConfig.from_env(),
            download=DownloadConfig.from_env(),
            engine=EngineConfig.from_env(),
            history=HistoryConfig.from_env(),
        )

    @property
    def history_database(self) -> Path:
        return self.history.database_path(self.trust.installroot)


# 🔑📦🔚

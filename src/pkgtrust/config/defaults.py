#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for pkgtrust configuration."""

from __future__ import annotations

# =================================
# Trust defaults
# =================================
DEFAULT_INSTALLROOT = "/"
DEFAULT_GPGCHECK = False
DEFAULT_LOCALPKG_GPGCHECK = False

# =================================
# Key defaults
# =================================
TRUSTED_KEY_NAME = "gpg-pubkey"  # Name of trust records in the rpm database
SHORT_KEY_ID_LENGTH = 8
TEMP_KEY_PREFIX = "rpmkey"

# =================================
# Download defaults
# =================================
DEFAULT_DOWNLOAD_TIMEOUT = 30.0
DEFAULT_DOWNLOAD_RETRIES = 3
DEFAULT_USER_AGENT = "pkgtrust"
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# =================================
# Engine defaults
# =================================
DEFAULT_RPMKEYS_BIN = "rpmkeys"
DEFAULT_RPM_BIN = "rpm"

# =================================
# History defaults
# =================================
HISTORY_DB_RELPATH = "var/lib/pkgtrust/history.sqlite"

# 🔑📦🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Public key material: resolution, armor checks and identity extraction."""

from __future__ import annotations

from pkgtrust.keys.key_info import KeyInfo, is_url, short_key_id
from pkgtrust.keys.pgp import RawKeyInfo, armor_public_key, parse_key_infos, read_public_key

__all__ = [
    "KeyInfo",
    "RawKeyInfo",
    "armor_public_key",
    "is_url",
    "parse_key_infos",
    "read_public_key",
    "short_key_id",
]

# 🔑📦🔚

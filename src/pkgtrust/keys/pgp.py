#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""OpenPGP public key parsing on top of pgpy."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from attrs import define
from pgpy import PGPKey
from pgpy.errors import PGPError
from pgpy.types import Armorable
from provide.foundation import logger

# pgpy raises these for malformed or unexpected key blocks
KEY_PARSE_ERRORS = (PGPError, ValueError)


@define(frozen=True)
class RawKeyInfo:
    """Identity of one primary key found in a key file."""

    id: str
    user_id: str
    fingerprint: str


def is_armored(data: bytes) -> bool:
    """Return True if ``data`` contains an ASCII-armored PGP block."""
    return Armorable.is_armor(data)


def _seven_bit(data: bytes) -> bytes:
    # pgpy only unarmors 7-bit text; armor header values such as Comment may be UTF-8
    return data.decode("utf-8", errors="replace").encode("ascii", errors="replace")


def load_public_keys(data: bytes) -> list[PGPKey]:
    """Parse the primary public keys in ``data``, in file order.

    Armored and binary input are both accepted. Secret keys are skipped.

    Raises:
        PGPError, ValueError: If the key block cannot be parsed
    """
    blob = _seven_bit(data) if is_armored(data) else data
    _, keys = PGPKey.from_blob(blob)
    return [key for key in keys.values() if key.is_public]


def key_identity(key: PGPKey) -> RawKeyInfo:
    user_ids = key.userids
    return RawKeyInfo(
        id=key.fingerprint.keyid,
        user_id=user_ids[0].userid if user_ids else "",
        fingerprint=str(key.fingerprint),
    )


def parse_key_infos(key_file: BinaryIO) -> list[RawKeyInfo]:
    """Extract ``{id, user_id, fingerprint}`` for every primary key in a file.

    Content that holds no parseable key yields an empty list.
    """
    try:
        keys = load_public_keys(key_file.read())
    except KEY_PARSE_ERRORS as e:
        logger.debug("No key information found", error=str(e))
        return []
    return [key_identity(key) for key in keys]


def read_public_key(path: Path) -> bytes:
    """Return the binary packets of the last key in an armored public key file.

    Raises:
        ValueError: If the file is not an armored public key block
        PGPError: If the armored block cannot be parsed
    """
    data = path.read_bytes()
    if not is_armored(data):
        raise ValueError(f"{path} is not ASCII-armored")

    keys = load_public_keys(data)
    if not keys:
        raise ValueError(f"{path} holds no public key")
    return bytes(keys[-1])


def armor_public_key(packet: bytes) -> str:
    """ASCII-armor binary public key packets as a PUBLIC KEY BLOCK."""
    key, _ = PGPKey.from_blob(packet)
    if not key.is_public:
        raise ValueError("Only public keys can be armored for import")
    return str(key)


# 🔑📦🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Test keys/pgp.py - key identity extraction and armor checks."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

from pgpy import PGPKey
import pytest

from pkgtrust.keys.pgp import (
    RawKeyInfo,
    armor_public_key,
    is_armored,
    parse_key_infos,
    read_public_key,
)


@pytest.mark.unit
class TestParseKeyInfos:
    """Test the key-info extractor."""

    def test_single_key(self, key_factory: Any) -> None:
        with key_factory.write().open("rb") as key_file:
            infos = parse_key_infos(key_file)

        assert infos == [
            RawKeyInfo(
                id=key_factory.key_id(),
                user_id=key_factory.default_user_id,
                fingerprint=key_factory.fingerprint(),
            )
        ]

    def test_keys_in_file_order(self, key_factory: Any) -> None:
        with key_factory.write(seeds=(1, 2)).open("rb") as key_file:
            infos = parse_key_infos(key_file)

        assert [info.id for info in infos] == [key_factory.key_id(1), key_factory.key_id(2)]
        assert infos[1].user_id == key_factory.user_id(2)

    def test_binary_keys_are_read(self, key_factory: Any) -> None:
        infos = parse_key_infos(io.BytesIO(key_factory.packets()))
        assert [info.fingerprint for info in infos] == [key_factory.fingerprint()]

    def test_key_id_is_fingerprint_suffix(self, key_factory: Any) -> None:
        (info,) = parse_key_infos(io.BytesIO(key_factory.packets()))
        assert len(info.fingerprint) == 40
        assert info.fingerprint.endswith(info.id)
        assert info.id == info.id.upper()

    @pytest.mark.parametrize("content", [b"", b"<html>not a key</html>"])
    def test_no_key_yields_empty_list(self, content: bytes) -> None:
        assert parse_key_infos(io.BytesIO(content)) == []


@pytest.mark.unit
class TestReadPublicKey:
    def test_returns_last_key_packets(self, key_factory: Any) -> None:
        packet = read_public_key(key_factory.write(seeds=(1, 2)))
        parsed, _ = PGPKey.from_blob(packet)
        assert parsed.fingerprint == key_factory.fingerprint(2)

    def test_armor_header_with_non_ascii_text(self, key_factory: Any) -> None:
        path = key_factory.write(headers={"Version": "GnuPG v2", "Comment": "Jürgen Müller <jm@example.org>"})
        assert is_armored(path.read_bytes())
        parsed, _ = PGPKey.from_blob(read_public_key(path))
        assert parsed.fingerprint == key_factory.fingerprint()

    def test_binary_file_is_rejected(self, key_factory: Any) -> None:
        with pytest.raises(ValueError, match="not ASCII-armored"):
            read_public_key(key_factory.write(armored=False))

    def test_secret_key_block_is_rejected(self, key_factory: Any, tmp_path: Path) -> None:
        path = tmp_path / "secret.asc"
        path.write_text(str(key_factory.secret_key()))
        with pytest.raises(ValueError, match="holds no public key"):
            read_public_key(path)


@pytest.mark.unit
class TestArmorPublicKey:
    def test_armored_block_is_public_key(self, key_factory: Any) -> None:
        armored = armor_public_key(key_factory.packets())

        assert armored.startswith("-----BEGIN PGP PUBLIC KEY BLOCK-----")
        assert is_armored(armored.encode())
        parsed, _ = PGPKey.from_blob(armored)
        assert parsed.fingerprint == key_factory.fingerprint()

    def test_secret_key_is_refused(self, key_factory: Any) -> None:
        with pytest.raises(ValueError, match="Only public keys"):
            armor_public_key(bytes(key_factory.secret_key()))


# 🔑📦🔚

#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Trusted key candidates resolved from a local path or URL."""

from __future__ import annotations

from collections.abc import Callable
import contextlib
import os
from pathlib import Path
import re
import tempfile
from types import TracebackType
from typing import BinaryIO
import weakref

from provide.foundation import logger

from pkgtrust.config.defaults import SHORT_KEY_ID_LENGTH, TEMP_KEY_PREFIX
from pkgtrust.download import FileDownloader
from pkgtrust.exceptions import KeyImportError
from pkgtrust.keys.pgp import KEY_PARSE_ERRORS, RawKeyInfo, parse_key_infos, read_public_key

FILE_SCHEME = "file://"

_URL_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")

KeyInfoExtractor = Callable[[BinaryIO], list[RawKeyInfo]]


def is_url(reference: str) -> bool:
    """Return True if ``reference`` carries a URL scheme."""
    return bool(_URL_RE.match(reference))


def short_key_id(key_id: str) -> str:
    """Last eight characters of a key id, or the whole id if shorter."""
    return key_id[-SHORT_KEY_ID_LENGTH:] if len(key_id) > SHORT_KEY_ID_LENGTH else key_id


def _remove_temp_file(path: str) -> None:
    with contextlib.suppress(FileNotFoundError):
        os.unlink(path)
        logger.debug("Removed downloaded key file", path=path)


class KeyInfo:
    """A public key that can be looked up in, or imported into, the trust store.

    Remote references are downloaded into a temporary file owned by the
    instance. The file is removed by ``close()``, on context exit, or when
    the instance is garbage collected, and immediately if construction fails.
    """

    def __init__(
        self,
        key_url: str,
        downloader: FileDownloader | None = None,
        extractor: KeyInfoExtractor = parse_key_infos,
    ) -> None:
        self._url = key_url
        self._key_id = ""
        self._user_id = ""
        self._fingerprint = ""
        self._cleanup: weakref.finalize | None = None

        try:
            self._path = self._resolve(key_url, downloader)
            self._load(extractor)
        except BaseException:
            self.close()
            raise

    def _resolve(self, key_url: str, downloader: FileDownloader | None) -> Path:
        if not is_url(key_url):
            return Path(key_url)
        if key_url.startswith(FILE_SCHEME):
            return Path(key_url[len(FILE_SCHEME) :])

        fd, temp_path = tempfile.mkstemp(prefix=TEMP_KEY_PREFIX)
        os.close(fd)
        self._cleanup = weakref.finalize(self, _remove_temp_file, temp_path)

        logger.debug("Downloading remote key", url=key_url, path=temp_path)
        downloader = downloader or FileDownloader()
        downloader.add(key_url, temp_path)
        downloader.download(fail_fast=True, resume=True)
        return Path(temp_path)

    def _load(self, extractor: KeyInfoExtractor) -> None:
        with self._path.open("rb") as key_file:
            # Only the last key in the file is kept
            for info in extractor(key_file):
                self._key_id = info.id
                self._user_id = info.user_id
                self._fingerprint = info.fingerprint

        try:
            self._packet = read_public_key(self._path)
        except KEY_PARSE_ERRORS as e:
            message = f'"{self._url}": key is not an armored public key.'
            raise KeyImportError(message, key_url=self._url) from e

        logger.debug(
            "Loaded key",
            url=self._url,
            key_id=self._key_id,
            user_id=self._user_id,
            fingerprint=self._fingerprint,
        )

    @property
    def url(self) -> str:
        return self._url

    @property
    def path(self) -> Path:
        return self._path

    @property
    def key_id(self) -> str:
        return self._key_id

    @property
    def short_key_id(self) -> str:
        return short_key_id(self._key_id)

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    @property
    def packet(self) -> bytes:
        return self._packet

    @property
    def packet_length(self) -> int:
        return len(self._packet)

    @property
    def is_downloaded(self) -> bool:
        return self._cleanup is not None

    def close(self) -> None:
        """Remove the downloaded key file, if any."""
        if self._cleanup is not None:
            self._cleanup()

    def __enter__(self) -> KeyInfo:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"KeyInfo(url={self._url!r}, key_id={self._key_id!r}, user_id={self._user_id!r})"


# 🔑📦🔚

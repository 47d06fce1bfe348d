#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Retrieval of remote key files over HTTP(S)."""

from __future__ import annotations

from pathlib import Path

import httpx
from provide.foundation import logger

from pkgtrust.config.config import DownloadConfig
from pkgtrust.config.defaults import DOWNLOAD_CHUNK_SIZE
from pkgtrust.exceptions import DownloadError


class FileDownloader:
    """Downloads a queue of URLs to local paths.

    Connection level retries are delegated to the httpx transport; a failed
    transfer is reported, never retried here.
    """

    def __init__(self, config: DownloadConfig | None = None, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config or DownloadConfig()
        self._transport = transport
        self._queue: list[tuple[str, Path]] = []

    def add(self, url: str, destination: str | Path) -> None:
        """Queue ``url`` for download into ``destination``."""
        self._queue.append((url, Path(destination)))

    def download(self, fail_fast: bool = True, resume: bool = True) -> None:
        """Download every queued URL.

        Args:
            fail_fast: Stop at the first failed transfer
            resume: Continue partially downloaded files with a Range request

        Raises:
            DownloadError: If any transfer failed
        """
        queue, self._queue = self._queue, []
        failures: list[str] = []
        with self._client() as client:
            for url, destination in queue:
                try:
                    self._fetch(client, url, destination, resume)
                except DownloadError as e:
                    logger.error("Download failed", url=url, error=str(e))
                    if fail_fast:
                        raise
                    failures.append(f"{url}: {e}")
        if failures:
            raise DownloadError(
                f"{len(failures)} of {len(queue)} downloads failed: " + "; ".join(failures),
                failures=failures,
            )

    def _client(self) -> httpx.Client:
        transport = self._transport or httpx.HTTPTransport(retries=self.config.retries)
        return httpx.Client(
            transport=transport,
            timeout=self.config.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
        )

    def _fetch(self, client: httpx.Client, url: str, destination: Path, resume: bool) -> None:
        offset = destination.stat().st_size if resume and destination.exists() else 0
        headers = {"Range": f"bytes={offset}-"} if offset else {}
        logger.debug("Downloading", url=url, destination=str(destination), offset=offset)

        try:
            with client.stream("GET", url, headers=headers) as response:
                if offset and response.status_code == 416:
                    logger.debug("Download already complete", url=url)
                    return
                if response.status_code >= 400:
                    raise DownloadError(f"HTTP {response.status_code} for {url}", url=url)
                mode = "ab" if offset and response.status_code == 206 else "wb"
                with destination.open(mode) as handle:
                    for chunk in response.iter_bytes(DOWNLOAD_CHUNK_SIZE):
                        handle.write(chunk)
        except httpx.HTTPError as e:
            raise DownloadError(f"Failed to download {url}: {e}", url=url) from e

        logger.debug("Download finished", url=url, size=destination.stat().st_size)


# 🔑📦🔚

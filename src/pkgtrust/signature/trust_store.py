#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Lookup and import of keys in the rpm database."""

from __future__ import annotations

from provide.foundation import logger

from pkgtrust.config.defaults import TRUSTED_KEY_NAME
from pkgtrust.engine.base import RecordIndex, RpmRc
from pkgtrust.exceptions import KeyImportError
from pkgtrust.keys.key_info import KeyInfo
from pkgtrust.signature.context import VerificationContext


class TrustStore:
    """Trusted keys are ``gpg-pubkey`` records whose version is the short key id."""

    def is_trusted(self, context: VerificationContext, key: KeyInfo) -> bool:
        short_id = key.short_key_id.lower()
        records = context.engine.iter_records(context.session, RecordIndex.NAME, TRUSTED_KEY_NAME)
        for record in records:
            if record.version.lower() == short_id:
                logger.debug("Key found in rpm database", key_id=key.key_id, record=record.version)
                return True
        return False

    def import_key(self, context: VerificationContext, key: KeyInfo) -> bool:
        """Import ``key`` unless already trusted.

        Returns:
            True if the key was imported, False if it was already present

        Raises:
            KeyImportError: If the engine rejects the key
        """
        if self.is_trusted(context, key):
            logger.debug("Key already trusted, skipping import", key_id=key.key_id)
            return False

        rc = context.engine.import_pubkey(context.session, key.packet, key.packet_length)
        if rc != RpmRc.OK:
            raise KeyImportError(f'Failed to import public key "{key.url}" to rpmdb.', key_url=key.url)
        logger.info("Imported public key", key_id=key.key_id, user_id=key.user_id, url=key.url)
        return True


# 🔑📦🔚

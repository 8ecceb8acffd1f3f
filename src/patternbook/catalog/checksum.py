# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for catalog contents."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable

from .model_entry import PatternEntry


def compute_catalog_checksum(entries: Iterable[PatternEntry]) -> str:
    """Calculate the checksum for ``entries`` in their iteration order.

    Args:
        entries: Entries contributing to the checksum.

    Returns:
        str: Hex-encoded SHA-256 checksum covering every entry field.
    """
    hasher = hashlib.sha256()
    for entry in entries:
        payload = json.dumps(entry.to_dict(), sort_keys=True, ensure_ascii=False)
        hasher.update(payload.encode("utf-8"))
        hasher.update(b"\0")
    return hasher.hexdigest()


__all__ = ["compute_catalog_checksum"]

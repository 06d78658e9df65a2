# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.shared.errors import CastError

# row ids are signed 64-bit integers in every supported database
MAX_IDENTIFIER = 2**63 - 1


def parse_identifier(raw: object) -> int:
    """Turn a path or token identifier into a row id, or raise ``CastError``."""
    if isinstance(raw, bool):
        raise CastError(raw)
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not (text.isascii() and text.isdigit()):
            raise CastError(raw)
        value = int(text)
    if not 0 <= value <= MAX_IDENTIFIER:
        raise CastError(raw)
    return value

# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Encoding helpers shared by the hash formats."""

import base64
import binascii


def ab64_encode(data: bytes) -> str:
    """Encode bytes using "adapted" base64 ("." instead of "+", no padding).

    Parameters
    ----------
    data : bytes
        The bytes to encode.

    Returns
    -------
    str
        The encoded string.
    """
    return base64.b64encode(data, altchars=b"./").decode("ascii").rstrip("=")


def ab64_decode(value: str) -> bytes:
    """Decode an "adapted" base64 string.

    Parameters
    ----------
    value : str
        The encoded string.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If the value is not valid adapted base64.
    """
    padded = value + "=" * (-len(value) % 4)
    try:
        return base64.b64decode(
            padded.encode("ascii"), altchars=b"./", validate=True
        )
    except (binascii.Error, UnicodeEncodeError) as error:
        raise ValueError(str(error)) from error


__all__ = ["ab64_encode", "ab64_decode"]

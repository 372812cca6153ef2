# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Byte-order-mark detection and UTF-16 decoding for JSON documents.

JSON text is handed to the schema engine as UTF-8. Documents saved as UTF-16
are recognised either by their byte-order mark or, when the mark is missing,
by a zero byte in one of the first two positions (ASCII text encoded as
UTF-16 always has one). The zero-byte guess cannot tell UTF-16 text from
binary data; such input fails to decode or is later rejected as malformed
JSON.

A byte-order mark is rejected unless the caller explicitly allows it.
"""

from typing import Optional, Tuple

from ..exceptions import LoadError


# https://en.wikipedia.org/wiki/Byte_order_mark#Byte_order_marks_by_encoding
BOM_UTF8 = b"\xef\xbb\xbf"
BOM_UTF16_BE = b"\xfe\xff"
BOM_UTF16_LE = b"\xff\xfe"

UTF8 = "utf-8"
UTF16_BE = "utf-16-be"
UTF16_LE = "utf-16-le"

_BOMS = (
    (BOM_UTF8, UTF8),
    (BOM_UTF16_BE, UTF16_BE),
    (BOM_UTF16_LE, UTF16_LE),
)


def detect_encoding(buffer: bytes) -> Tuple[bytes, Optional[str]]:
    """Return ``(bom, encoding)`` for the start of ``buffer``.

    ``bom`` is empty when no byte-order mark is present. ``encoding`` is None
    when nothing points away from plain UTF-8.
    """
    if len(buffer) < 2:
        return b"", None

    for bom, encoding in _BOMS:
        if buffer.startswith(bom):
            return bom, encoding

    if buffer[0] == 0:
        return b"", UTF16_BE
    if buffer[1] == 0:
        return b"", UTF16_LE
    return b"", None


def normalize(buffer: bytes, allow_bom: bool = False) -> bytes:
    """Return ``buffer`` as UTF-8 bytes ready for JSON parsing.

    Args:
        buffer: Raw document bytes
        allow_bom: Strip a leading byte-order mark instead of rejecting it

    Raises:
        LoadError: On an unexpected byte-order mark or undecodable UTF-16
    """
    bom, encoding = detect_encoding(buffer)

    if bom:
        if not allow_bom:
            raise LoadError("unexpected BOM, see `-b` flag")
        buffer = buffer[len(bom):]

    if encoding is None or encoding == UTF8:
        return buffer

    try:
        return buffer.decode(encoding).encode(UTF8)
    except UnicodeDecodeError as exc:
        raise LoadError(f"invalid {encoding.upper()} text: {exc.reason}") from exc

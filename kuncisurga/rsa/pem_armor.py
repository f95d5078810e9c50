"""
pem_armor.py  -- PEM text armor for DER blobs

Functions:
- encode_pem(label, der)      -> bytes with one BEGIN/END block
- decode_pem_blocks(data)     -> list of PemBlock(label, body)

The armor is the usual RFC 7468 layout: a BEGIN line, the base64 body in
64-character lines, an END line. Labels are emitted as given, so a PKIX
public key can be framed as "RSA PUBLIC KEY" (cryptography itself only
writes "PUBLIC KEY" for SubjectPublicKeyInfo).
"""

import base64
import binascii
import re
from typing import NamedTuple

LINE_WIDTH = 64

_BEGIN_RE = re.compile(rb"^-----BEGIN ([^\r\n-]+)-----\s*$")
_END_RE = re.compile(rb"^-----END ([^\r\n-]+)-----\s*$")


class PemDecodeError(ValueError):
    pass


class PemBlock(NamedTuple):
    label: str
    body: bytes


def _check_label(label: str):
    if not label or "-" in label or "\n" in label or "\r" in label:
        raise ValueError(f"invalid PEM label: {label!r}")


def encode_pem(label: str, der: bytes) -> bytes:
    _check_label(label)
    b64 = base64.b64encode(der)
    lines = [f"-----BEGIN {label}-----".encode("ascii")]
    lines += [b64[i:i + LINE_WIDTH] for i in range(0, len(b64), LINE_WIDTH)]
    lines.append(f"-----END {label}-----".encode("ascii"))
    return b"\n".join(lines) + b"\n"


def decode_pem_blocks(data) -> list:
    """
    Parse every BEGIN/END block in `data` (bytes or str), in order.

    Text outside blocks is skipped. Raises PemDecodeError on an unterminated
    block, an END label that does not match its BEGIN, a bad base64 body,
    or str input that is not ASCII.
    """
    if isinstance(data, str):
        try:
            data = data.encode("ascii")
        except UnicodeEncodeError as exc:
            raise PemDecodeError(f"PEM text must be ASCII: {exc}") from exc

    blocks = []
    label = None
    body = []
    for lineno, line in enumerate(data.splitlines(), start=1):
        if label is None:
            m = _BEGIN_RE.match(line)
            if m:
                label = m.group(1).decode("ascii")
                body = []
            continue

        m = _END_RE.match(line)
        if m is None:
            body.append(line.strip())
            continue
        end_label = m.group(1).decode("ascii")
        if end_label != label:
            raise PemDecodeError(f"line {lineno}: END {end_label!r} does not close BEGIN {label!r}")
        try:
            der = base64.b64decode(b"".join(body), validate=True)
        except binascii.Error as exc:
            raise PemDecodeError(f"line {lineno}: bad base64 in {label!r} block: {exc}") from exc
        blocks.append(PemBlock(label, der))
        label = None

    if label is not None:
        raise PemDecodeError(f"unterminated {label!r} block")
    return blocks

#!/usr/bin/env python3
# make_rsa_keypair.py
"""
Generate an RSA key pair and print it in one of three forms:
- mode 'raw'    : key numbers (n, e, d, p, q) as comments
- mode 'encoded': DER bytes as hex (PKCS#1 private, PKIX public)
- mode 'pem'    : PEM blocks (default; also used for unknown modes)

Keys go to stdout. Progress and timing go to the log (stderr).
"""

import argparse
import logging
import sys
import time

from kuncisurga.rsa.options import (
    DEFAULT_BIT_SIZE, DEFAULT_PUBLIC_EXPONENT, with_bit_size, with_public_exponent
)
from kuncisurga.rsa.rsa_keypair_gen import Generator, KeyPairError

logger = logging.getLogger("kuncisurga")

RAW_MODE = "raw"
ENCODED_MODE = "encoded"
PEM_MODE = "pem"

_DISPLAY_NAMES = {RAW_MODE: "Raw", ENCODED_MODE: "Encoded", PEM_MODE: "PEM"}


def _print_raw(gen):
    key_pair = gen.generate_raw_key_pair()
    priv = key_pair.private.private_numbers()
    pub = key_pair.public.public_numbers()
    print("Raw Private Key:")
    print(f"# n = {priv.public_numbers.n}")
    print(f"# e = {priv.public_numbers.e}")
    print(f"# d = {priv.d}")
    print(f"# p = {priv.p}")
    print(f"# q = {priv.q}")
    print("Raw Public Key:")
    print(f"# n = {pub.n}")
    print(f"# e = {pub.e}")


def _print_encoded(gen):
    key_pair = gen.generate_encoded_key_pair()
    print(f"Encoded Private Key: {key_pair.private.hex()}")
    print(f"Encoded Public Key: {key_pair.public.hex()}")


def _print_pem(gen):
    key_pair = gen.generate_pem_key_pair()
    print("PEM Private Key:")
    print(key_pair.private.decode("ascii"), end="")
    print("PEM Public Key:")
    print(key_pair.public.decode("ascii"), end="")


_PRINTERS = {
    RAW_MODE: _print_raw,
    ENCODED_MODE: _print_encoded,
    PEM_MODE: _print_pem,
}


def build_parser():
    ap = argparse.ArgumentParser(description="Generate an RSA key pair (raw, DER or PEM).")
    ap.add_argument("--mode", "-mode", default=PEM_MODE,
                    help="Output mode: raw, encoded or pem. Anything else means pem.")
    ap.add_argument("--bits", type=int, default=DEFAULT_BIT_SIZE, help="Modulus size in bits.")
    ap.add_argument("--e", type=int, default=DEFAULT_PUBLIC_EXPONENT,
                    help="Public exponent (65537 recommended).")
    ap.add_argument("--verbose", action="store_true", help="Log debug messages.")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    mode = args.mode if args.mode in _PRINTERS else PEM_MODE
    logger.info("Starting the key pair generation with %s mode", mode)

    gen = Generator(with_bit_size(args.bits), with_public_exponent(args.e))
    t0 = time.perf_counter()
    try:
        _PRINTERS[mode](gen)
    except KeyPairError as exc:
        logger.error("Error generating %s key pair: %s", _DISPLAY_NAMES[mode], exc)
        return 1
    dt = time.perf_counter() - t0

    logger.info("%s key pair generated successfully", _DISPLAY_NAMES[mode])
    logger.info("Key pair generation completed in %.3fs", dt)
    return 0


if __name__ == "__main__":
    sys.exit(main())

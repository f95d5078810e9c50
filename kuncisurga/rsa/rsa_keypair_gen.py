# rsa_keypair_gen.py
# Generate RSA key pairs and serialize them in three layers:
# - raw:     cryptography RSAPrivateKey / RSAPublicKey objects
# - encoded: DER bytes (PKCS#1 private key, PKIX SubjectPublicKeyInfo public key)
# - pem:     the DER bytes wrapped in "RSA PRIVATE KEY" / "RSA PUBLIC KEY" armor
# Each layer calls the one below it; errors are translated once, where
# cryptography is called, and passed up unchanged after that.

import logging
from dataclasses import dataclass

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from kuncisurga.rsa.options import DEFAULT_BIT_SIZE, DEFAULT_PUBLIC_EXPONENT
from kuncisurga.rsa.pem_armor import encode_pem

logger = logging.getLogger(__name__)

PRIVATE_KEY_LABEL = "RSA PRIVATE KEY"
PUBLIC_KEY_LABEL = "RSA PUBLIC KEY"


class KeyPairError(Exception):
    pass


class GenerationError(KeyPairError):
    pass


class GenerationCancelled(GenerationError):
    pass


class EncodingError(KeyPairError):
    pass


@dataclass(frozen=True)
class KeyPair:
    public: rsa.RSAPublicKey
    private: rsa.RSAPrivateKey


@dataclass(frozen=True)
class KeyPairEncoded:
    public: bytes
    private: bytes


def _check_cancel(cancel, stage):
    if cancel is not None and cancel.is_set():
        raise GenerationCancelled(f"cancelled before {stage}")


class Generator:
    """
    RSA key pair generator.

    Options (see kuncisurga.rsa.options) are applied in order on top of the
    defaults; nothing is validated until a key is generated. Generation only
    reads the configuration, so one instance can be shared between threads.

    Every generate_* method takes an optional `cancel` threading.Event. Key
    generation itself cannot be interrupted, so the event is only checked
    before generation and before each encoding stage.
    """

    def __init__(self, *options):
        self.bit_size = DEFAULT_BIT_SIZE
        self.public_exponent = DEFAULT_PUBLIC_EXPONENT
        for opt in options:
            opt(self)

    def __repr__(self):
        return f"Generator(bit_size={self.bit_size}, public_exponent={self.public_exponent})"

    def generate_raw_key_pair(self, cancel=None) -> KeyPair:
        """Generate a fresh key pair. Raises GenerationError."""
        _check_cancel(cancel, "key generation")
        logger.debug("generating %s-bit RSA key (e=%s)", self.bit_size, self.public_exponent)
        try:
            private_key = rsa.generate_private_key(
                public_exponent=self.public_exponent,
                key_size=self.bit_size,
            )
        except (ValueError, TypeError, OverflowError) as exc:
            raise GenerationError(
                f"cannot generate {self.bit_size}-bit RSA key: {exc}"
            ) from exc

        return KeyPair(public=private_key.public_key(), private=private_key)

    def generate_encoded_key_pair(self, cancel=None) -> KeyPairEncoded:
        """
        Generate a key pair and DER-encode it.

        The private key is PKCS#1 (RSAPrivateKey), the public key is PKIX
        (SubjectPublicKeyInfo). Raises GenerationError or EncodingError.
        """
        raw = self.generate_raw_key_pair(cancel)
        _check_cancel(cancel, "DER encoding")

        private_der = raw.private.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.TraditionalOpenSSL,
            encryption_algorithm=serialization.NoEncryption(),
        )
        try:
            public_der = raw.public.public_bytes(
                encoding=serialization.Encoding.DER,
                format=serialization.PublicFormat.SubjectPublicKeyInfo,
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise EncodingError(f"cannot encode public key: {exc}") from exc

        logger.debug("DER encoded: private %d bytes, public %d bytes", len(private_der), len(public_der))
        return KeyPairEncoded(public=public_der, private=private_der)

    def generate_pem_key_pair(self, cancel=None) -> KeyPairEncoded:
        """Generate a key pair and return both halves as PEM text (bytes)."""
        encoded = self.generate_encoded_key_pair(cancel)
        _check_cancel(cancel, "PEM encoding")

        return KeyPairEncoded(
            public=encode_pem(PUBLIC_KEY_LABEL, encoded.public),
            private=encode_pem(PRIVATE_KEY_LABEL, encoded.private),
        )


def new_generator(*options) -> Generator:
    return Generator(*options)

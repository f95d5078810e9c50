"""
Shared fixtures for the key pair tests.
"""

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from kuncisurga.rsa.rsa_keypair_gen import Generator, KeyPair


@pytest.fixture(scope="session")
def fixed_private_key():
    # 1024 bits keeps the suite fast; size checks generate their own keys
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture
def fixed_key_pair(fixed_private_key):
    return KeyPair(public=fixed_private_key.public_key(), private=fixed_private_key)


@pytest.fixture
def pinned_generator(fixed_key_pair):
    """Generator whose raw stage always returns fixed_key_pair."""
    gen = Generator()
    gen.generate_raw_key_pair = lambda cancel=None: fixed_key_pair
    return gen

# options.py
# Defaults and construction options for the RSA key pair generator.
# An option is a callable taking the generator and assigning one field;
# options are applied in order, so the last one for a field wins.

# ======== CONFIGURABLE PARAMETERS ========
DEFAULT_BIT_SIZE = 2048          # 2048 is the usual floor for long-term keys
DEFAULT_PUBLIC_EXPONENT = 65537
# ========================================


def with_bit_size(bit_size: int):
    """Override the modulus size. Validated only when a key is generated."""
    def option(gen):
        gen.bit_size = bit_size
    return option


def with_public_exponent(exponent: int):
    """Override the public exponent (the primitive accepts 3 or 65537)."""
    def option(gen):
        gen.public_exponent = exponent
    return option

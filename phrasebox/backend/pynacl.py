import nacl.utils


def randbelow(n: int) -> int:
    """Return uniform random integer in range [0, n).

    Draws whole bytes from libsodium and rejects values from the incomplete
    top interval, so the result is not biased by the modulo.

    """
    if n <= 0:
        raise ValueError(f"randbelow: upper bound must be positive, got {n}")
    nbytes = (n.bit_length() + 7) // 8
    space = 256 ** nbytes
    limit = space - space % n
    while True:
        value = int.from_bytes(nacl.utils.random(nbytes), 'big')
        if value < limit:
            return value % n

# backends provided by Python Standard Library

import secrets


def randbelow(n: int) -> int:
    if n <= 0:
        raise ValueError(f"randbelow: upper bound must be positive, got {n}")
    return secrets.randbelow(n)

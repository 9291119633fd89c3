from collections import Counter

import pytest

from phrasebox import backend


@pytest.fixture(params=['pynacl', 'standard'])
def randbelow(request):
    module = pytest.importorskip('phrasebox.backend.' + request.param)
    return module.randbelow


def test_randbelow_range(randbelow):
    for n in (1, 2, 7, 255, 256, 257, 18_325, 2 ** 40 + 3):
        for _ in range(50):
            assert 0 <= randbelow(n) < n


def test_randbelow_covers_small_range(randbelow):
    counts = Counter(randbelow(5) for _ in range(2000))
    assert sorted(counts) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("n", [0, -1])
def test_randbelow_invalid(randbelow, n):
    with pytest.raises(ValueError):
        randbelow(n)


def test_backend_priority():
    assert backend.__all__ == ('randbelow',)
    assert backend.backend_for('randbelow') in ('pynacl', 'standard')


def test_missing_surrogate(monkeypatch):
    monkeypatch.setattr(backend, 'available_backends', ())
    assert backend.backend_for('randbelow') is None
    with pytest.raises(backend.MissingError):
        backend.__getattr__('randbelow')(10)


def test_unknown_symbol():
    with pytest.raises(AttributeError):
        backend.no_such_symbol

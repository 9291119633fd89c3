import pytest

from phrasebox import strategy
from phrasebox.strategy import Strategy, NoList, WordList, SyllableList, token_source

WORDS = ('correct', 'horse', 'battery', 'staple')


def test_strategy_values():
    assert Strategy('nolist') is Strategy.NO_LIST
    assert Strategy('wordlist') is Strategy.WORD_LIST
    assert Strategy('syllablelist') is Strategy.SYLLABLE_LIST
    assert str(Strategy.WORD_LIST) == 'wordlist'
    with pytest.raises(ValueError):
        Strategy('markov')


def test_every_strategy_has_source():
    assert set(strategy.SOURCE_BY_STRATEGY) == set(Strategy)


def test_token_source():
    assert isinstance(token_source(Strategy.NO_LIST), NoList)
    assert isinstance(token_source('wordlist', WORDS), WordList)
    assert isinstance(token_source(Strategy.SYLLABLE_LIST, WORDS), SyllableList)


def test_nolist_token():
    source = NoList()
    for _ in range(200):
        token = source.next_token()
        assert 3 <= len(token) <= 12
        assert all(c in strategy.VOWELS or c in strategy.CONSONANTS for c in token)


def test_nolist_letter_choice(monkeypatch):
    draws = iter([
        0,      # length 3
        3, 4,   # vowel, VOWELS[4]
        4, 0,   # consonant, CONSONANTS[0]
        10, 20,  # consonant, CONSONANTS[20]
    ])
    monkeypatch.setattr(strategy.backend, 'randbelow', lambda n: next(draws))
    assert NoList().next_token() == 'ubz'


def test_nolist_pool_size():
    source = NoList()
    assert source.pool_size(' ') == 27
    assert source.pool_size('') == 26
    assert source.pool_size('--') == 28


def test_nolist_rejects_dictionary():
    with pytest.raises(ValueError):
        NoList(WORDS)


def test_dictionary_token():
    source = WordList(WORDS)
    tokens = {source.next_token() for _ in range(200)}
    assert tokens <= set(WORDS)
    assert source.pool_size(' ') == len(WORDS)
    assert source.dictionary == WORDS


def test_dictionary_default(monkeypatch):
    monkeypatch.setattr(WordList, 'load_dictionary', staticmethod(lambda: WORDS))
    monkeypatch.setattr(SyllableList, 'load_dictionary', staticmethod(lambda: ('ba', 'ke')))
    assert WordList().pool_size(' ') == 4
    assert SyllableList().pool_size(' ') == 2


def test_syllable_list_default():
    source = SyllableList()
    assert source.pool_size('-') == len(source.dictionary) > 1000
    assert source.next_token() in source.dictionary


def test_empty_dictionary():
    with pytest.raises(ValueError):
        WordList(())

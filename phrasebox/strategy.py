# strategy
# (token sources for passphrase generation)
#

import enum

from . import backend
from .wordlists import load_words, load_syllables

VOWELS = ('a', 'e', 'i', 'o', 'u')
CONSONANTS = ('b', 'c', 'd', 'f', 'g', 'h', 'j', 'k', 'l', 'm', 'n',
              'p', 'q', 'r', 's', 't', 'v', 'w', 'x', 'y', 'z')

# Synthetic word length is uniform in [MIN, MAX]
SYNTHETIC_MIN_LENGTH = 3
SYNTHETIC_MAX_LENGTH = 12
# Letter draw is uniform in [0, 10], values up to VOWEL_THRESHOLD pick a vowel
LETTER_DRAW_RANGE = 11
VOWEL_THRESHOLD = 3


class Strategy(enum.Enum):

    """How the passphrase tokens are produced."""

    NO_LIST = 'nolist'
    WORD_LIST = 'wordlist'
    SYLLABLE_LIST = 'syllablelist'

    def __str__(self):
        return self.value


class NoList:

    """Pronounceable pseudo-words made of random letters, no dictionary.

    Each letter is a vowel with probability 4/11, otherwise a consonant.

    """

    def __init__(self, dictionary=None):
        if dictionary is not None:
            raise ValueError("NoList strategy does not use a dictionary.")

    def next_token(self) -> str:
        span = SYNTHETIC_MAX_LENGTH - SYNTHETIC_MIN_LENGTH + 1
        word_length = backend.randbelow(span) + SYNTHETIC_MIN_LENGTH
        letters = []
        for _ in range(word_length):
            if backend.randbelow(LETTER_DRAW_RANGE) <= VOWEL_THRESHOLD:
                letters.append(VOWELS[backend.randbelow(len(VOWELS))])
            else:
                letters.append(CONSONANTS[backend.randbelow(len(CONSONANTS))])
        return ''.join(letters)

    def pool_size(self, separator: str) -> int:
        return len(VOWELS) + len(CONSONANTS) + len(separator)


class DictionaryList:

    """Tokens drawn uniformly, with replacement, from a dictionary."""

    load_dictionary = None

    def __init__(self, dictionary=None):
        if dictionary is None:
            dictionary = type(self).load_dictionary()
        if not dictionary:
            raise ValueError(f"{self.__class__.__name__}: empty dictionary.")
        self._dictionary = tuple(dictionary)

    @property
    def dictionary(self) -> tuple:
        return self._dictionary

    def next_token(self) -> str:
        return self._dictionary[backend.randbelow(len(self._dictionary))]

    def pool_size(self, _separator: str) -> int:
        return len(self._dictionary)


class WordList(DictionaryList):
    load_dictionary = staticmethod(load_words)


class SyllableList(DictionaryList):
    load_dictionary = staticmethod(load_syllables)


SOURCE_BY_STRATEGY = {
    Strategy.NO_LIST: NoList,
    Strategy.WORD_LIST: WordList,
    Strategy.SYLLABLE_LIST: SyllableList,
}


def token_source(strategy, dictionary=None):
    """Create token source for `strategy`.

    :param strategy: `Strategy` member or its string value
    :param dictionary: Use these tokens instead of the default dictionary
                       (not allowed with `Strategy.NO_LIST`)

    """
    return SOURCE_BY_STRATEGY[Strategy(strategy)](dictionary)

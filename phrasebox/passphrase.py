# Passphrase
# (multi-word secret generator with entropy estimate)
#

import math
import logging

from . import backend
from .strategy import Strategy, token_source
from .stringutil import normalize, is_graphic

log = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ' '


class PassphraseError(ValueError):
    """Invalid passphrase request. Nothing was generated."""


def entropy_bits(pool_size: int, secret_length: int) -> float:
    """Entropy of a secret: log2(pool_size ** secret_length).

    Returns 0.0 for a pool with less than two choices or an empty secret.

    """
    if pool_size <= 1 or secret_length <= 0:
        return 0.0
    return secret_length * math.log2(pool_size)


class Passphrase:

    """Sequence of random tokens joined by a separator.

    The object is used for a single generation: call `generate` once,
    then read `secret` and `entropy`.

    Words from `include` are placed at random positions, replacing
    generated tokens. Generated tokens equal to a word from `exclude`
    are drawn once more. The redrawn token is not checked again,
    so it may still be an excluded word.

    """

    def __init__(self, length: int,
                 separator: str = DEFAULT_SEPARATOR,
                 strategy=Strategy.NO_LIST,
                 include=(),
                 exclude=(),
                 dictionary=None):
        self.length = length
        self.separator = separator or DEFAULT_SEPARATOR
        self.strategy = Strategy(strategy)
        self.include = list(include)
        self.exclude = set(exclude)
        self.dictionary = dictionary
        self.tokens = []
        #: Bits, log2(pool_size ** len(secret)). Valid after `generate`.
        self.entropy = 0.0
        self._source = None

    def __repr__(self):
        return "{}(length={!r}, separator={!r}, strategy={})".format(
            self.__class__.__name__, self.length, self.separator, self.strategy)

    @property
    def secret(self) -> str:
        return self.separator.join(self.tokens)

    def validate(self):
        """Check the request, trim surrounding whitespace of include words.

        Include words are checked in normalized form, but placed
        in the passphrase as given.

        :raises PassphraseError: on invalid request

        """
        if self.length < 1:
            raise PassphraseError("Passphrase length must be equal to or higher than 1.")
        if len(self.include) > self.length:
            raise PassphraseError("Number of words to include exceeds the passphrase length.")
        words = [word.strip() for word in self.include]
        normalized = [normalize(word) for word in words]
        for word, norm in zip(words, normalized):
            if not norm or not is_graphic(norm):
                raise PassphraseError(f"Included word {word!r} is empty or contains invalid characters.")
            if self.separator in word:
                raise PassphraseError(f"Included word {word!r} contains the separator {self.separator!r}.")
        for incl in (self.separator.join(self.include), self.separator.join(normalized)):
            for excl in sorted(self.exclude):
                if excl in incl:
                    raise PassphraseError(f"Word {excl!r} cannot be both included and excluded.")
        self.include = words

    @property
    def source(self):
        """Token source of the strategy, created on first use."""
        if self._source is None:
            self._source = token_source(self.strategy, self.dictionary)
        return self._source

    def generate(self) -> str:
        """Generate the secret, compute its entropy.

        :returns: The secret.
        :raises PassphraseError: on invalid request (before any generation)

        """
        self.validate()
        self._assemble()
        if self.include:
            self._include_words()
        if self.exclude:
            self._exclude_words()
        self.entropy = self.entropy_bits()
        return self.secret

    def pool_size(self) -> int:
        """Number of token choices, adjusted by include/exclude words."""
        pool_size = self.source.pool_size(self.separator)
        pool_size += len(self.include)
        pool_size -= len(self.exclude)
        return pool_size

    def entropy_bits(self) -> float:
        return entropy_bits(self.pool_size(), len(self.secret))

    def _assemble(self):
        self.tokens = [self.source.next_token() for _ in range(self.length)]

    def _include_words(self):
        """Replace tokens at random distinct positions by the include words.

        Both the positions and the words are sampled without replacement
        by partial Fisher-Yates shuffle of local lists.

        """
        positions = list(range(self.length))
        words = list(self.include)
        for i in range(len(words)):
            j = i + backend.randbelow(len(positions) - i)
            positions[i], positions[j] = positions[j], positions[i]
            k = i + backend.randbelow(len(words) - i)
            words[i], words[k] = words[k], words[i]
            self.tokens[positions[i]] = words[i]

    def _exclude_words(self):
        """Draw a new token in place of each excluded one (single pass)."""
        for i, token in enumerate(self.tokens):
            if token in self.exclude:
                self.tokens[i] = self.source.next_token()
                log.debug("Replaced excluded token at position %d", i)
                if self.tokens[i] in self.exclude:
                    log.debug("Replacement at position %d is excluded too, keeping it", i)


def generate(length: int,
             separator: str = DEFAULT_SEPARATOR,
             strategy=Strategy.NO_LIST,
             include=(),
             exclude=(),
             dictionary=None) -> tuple:
    """Generate random passphrase.

    :param length: Number of tokens (words, syllables)
    :param separator: Put this between the tokens (space if empty)
    :param strategy: `Strategy` member or its value, see `phrasebox.strategy`
    :param include: Words which must appear in the passphrase
    :param exclude: Words which must not appear in the passphrase
    :param dictionary: Replace the dictionary of WORD_LIST / SYLLABLE_LIST
    :returns: Tuple (secret, entropy_bits)
    :raises PassphraseError: on invalid request

    """
    p = Passphrase(length, separator, strategy, include, exclude, dictionary)
    p.generate()
    return p.secret, p.entropy


def new_passphrase(length: int, strategy=Strategy.NO_LIST) -> str:
    """Generate random passphrase with default separator, return the secret."""
    return Passphrase(length, strategy=strategy).generate()

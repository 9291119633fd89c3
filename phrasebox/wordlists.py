# wordlists
# (dictionaries of words and syllables for passphrase tokens)
#

import functools
import logging
from pathlib import Path

log = logging.getLogger(__name__)

# Prefer system wordlist, fallback to cached web download
# See: https://en.wikipedia.org/wiki/Words_(Unix)
WORDLIST_SYSTEM_PATH = Path('/usr/share/dict/words')
WORDLIST_CACHE_PATH = Path('~/.phrasebox/words').expanduser()
WORDLIST_WEB_URL = 'https://users.cs.duke.edu/~ola/ap/linuxwords'

SYLLABLES_PATH = Path(__file__).parent / 'syllables.txt'


def filter_wordlist(words) -> tuple:
    """Strip the words, drop empty ones, those containing "'" and duplicates.

    The order of first occurrence is preserved.

    """
    words = (w.strip() for w in words)
    return tuple(dict.fromkeys(w for w in words if w and "'" not in w))


def read_wordlist(path: Path) -> tuple:
    with open(path, 'r', encoding='utf-8') as f:
        lines = f.readlines()
    return filter_wordlist(lines)


@functools.lru_cache(maxsize=None)
def load_words() -> tuple:
    """Load and return the word dictionary."""
    # Try system dict/words
    try:
        words = read_wordlist(WORDLIST_SYSTEM_PATH)
        log.debug("Loaded %d words from %s", len(words), WORDLIST_SYSTEM_PATH)
        return words
    except FileNotFoundError:
        pass
    # Try cached downloaded words
    try:
        words = read_wordlist(WORDLIST_CACHE_PATH)
        log.debug("Loaded %d words from %s", len(words), WORDLIST_CACHE_PATH)
        return words
    except FileNotFoundError:
        pass
    # Try web download
    import urllib.request
    log.debug("Downloading word list from %s", WORDLIST_WEB_URL)
    with urllib.request.urlopen(WORDLIST_WEB_URL) as f:
        content = f.read()
    WORDLIST_CACHE_PATH.parent.mkdir(0o700, exist_ok=True)
    with open(WORDLIST_CACHE_PATH, 'wb') as f:
        f.write(content)
    return filter_wordlist(content.decode('utf-8').splitlines())


@functools.lru_cache(maxsize=None)
def load_wordlist_file(path) -> tuple:
    """Load user-supplied word list, one word per line."""
    words = read_wordlist(Path(path).expanduser())
    if not words:
        raise ValueError(f"Word list {str(path)!r} is empty.")
    return words


@functools.lru_cache(maxsize=None)
def load_syllables() -> tuple:
    """Load and return the syllable dictionary shipped with the package."""
    return read_wordlist(SYLLABLES_PATH)

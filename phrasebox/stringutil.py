# normalize, is_graphic
# (string utilities)
#

import unicodedata


def normalize(text: str) -> str:
    """Prepare the user-supplied `text` for use as a passphrase token.

    Replaces composed characters by basic ones, strips surrounding
    whitespace and converts to lowercase.

    """
    text = unicodedata.normalize('NFKD', text)
    output = []
    for c in text:
        if not unicodedata.combining(c):
            output += [c]
    return ''.join(output).strip().lower()


def is_graphic(text: str) -> bool:
    """Check that `text` is made only of visible characters.

    Control characters and any kind of whitespace are not graphic.

    """
    return all(c.isprintable() and not c.isspace() for c in text)

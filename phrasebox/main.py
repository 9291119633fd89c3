import sys
import logging
import argparse
import configparser
from pathlib import Path

from blessed import Terminal
import pyperclip

from . import backend, wordlists
from .passphrase import Passphrase, DEFAULT_SEPARATOR
from .strategy import Strategy, token_source

DATA_DIR = Path('~/.phrasebox')
DEFAULT_LENGTH = 4
DEFAULT_STRATEGY = Strategy.WORD_LIST
DEFAULT_COUNT = 10


class Config:

    def __init__(self, config_file=None):
        self.length = DEFAULT_LENGTH
        self.separator = DEFAULT_SEPARATOR
        self.strategy = DEFAULT_STRATEGY
        self.wordlist = None
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        if not config_file.exists():
            return
        print(f'Loading config {str(config_file)!r}...')
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'phrasebox':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                if key == 'length':
                    self.length = section.getint(key)
                elif key == 'separator':
                    self.separator = section[key]
                elif key == 'strategy':
                    self.strategy = Strategy(section[key])
                elif key == 'wordlist':
                    self.wordlist = Path(section[key]).expanduser()
                else:
                    print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                    continue

    def dictionary(self, strategy):
        """Custom word list applies only to WORD_LIST strategy."""
        if strategy == Strategy.WORD_LIST and self.wordlist is not None:
            return wordlists.load_wordlist_file(self.wordlist)
        return None


def run_gen(config_file, length, separator, strategy, include, exclude, count, copy):
    cfg = Config(config_file)
    length = cfg.length if length is None else length
    separator = cfg.separator if separator is None else separator
    strategy = cfg.strategy if strategy is None else Strategy(strategy)
    dictionary = cfg.dictionary(strategy)
    term = Terminal(stream=sys.stdout)
    secret = None
    for _ in range(count):
        p = Passphrase(length, separator, strategy, include, exclude, dictionary)
        secret = p.generate()
        print(secret, term.yellow(f"({p.entropy:.1f} bits)"), sep='   ')
    if copy and secret is not None:
        pyperclip.copy(secret)
        print("Copied to clipboard.")


def run_info(config_file):
    cfg = Config(config_file)
    print(f"Random backend: {backend.backend_for('randbelow') or 'missing'}")
    for strategy in Strategy:
        source = token_source(strategy, cfg.dictionary(strategy))
        pool_size = source.pool_size(cfg.separator)
        if hasattr(source, 'dictionary'):
            print(f"{strategy}: {len(source.dictionary)} tokens, pool size {pool_size}")
        else:
            print(f"{strategy}: synthetic, pool size {pool_size}")


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="phrasebox",
                                 description="Passphrase generator",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('--debug', action='store_true',
                    help="print debug messages")

    # Sub-commands
    sp = ap.add_subparsers()
    ap_gen = sp.add_parser("gen", aliases=['g'],
                           help="generate some random passphrases (default)")
    ap_gen.set_defaults(func=run_gen)
    ap_info = sp.add_parser("info", help="show dictionaries and pool sizes")
    ap_info.set_defaults(func=run_info)

    for subparser in (ap_gen, ap_info):
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=DATA_DIR / 'phrasebox.conf',
                               help="config file (default: %(default)s)")

    ap_gen.add_argument('-l', dest='length', type=int,
                        help=f"number of words (default: {DEFAULT_LENGTH})")
    ap_gen.add_argument('-s', dest='separator', type=str,
                        help=f"word separator (default: {DEFAULT_SEPARATOR!r})")
    ap_gen.add_argument('-m', dest='strategy', type=str,
                        choices=[str(s) for s in Strategy],
                        help=f"how the words are made (default: {DEFAULT_STRATEGY})")
    ap_gen.add_argument('-i', dest='include', action='append', default=[],
                        metavar='WORD',
                        help="word to be included (may be repeated)")
    ap_gen.add_argument('-x', dest='exclude', action='append', default=[],
                        metavar='WORD',
                        help="word to be excluded (may be repeated)")
    ap_gen.add_argument('-n', dest='count', type=int, default=DEFAULT_COUNT,
                        help="number of passphrases to generate "
                             "(default: %(default)s)")
    ap_gen.add_argument('--copy', action='store_true',
                        help="copy the last passphrase to clipboard")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_gen.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: None
    """
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level='DEBUG')
    delattr(args, 'debug')
    run_func = args.func
    delattr(args, 'func')
    try:
        run_func(**vars(args))
    except (ValueError, backend.MissingError) as e:
        print(e)
        sys.exit(1)

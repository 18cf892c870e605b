import pathlib
import string
import urllib.error
import urllib.request

import logging
logger = logging.getLogger()

DEFAULT_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"

ALPHABET = set(string.ascii_lowercase)

def read_words(lines):
    """
    normalize raw dictionary lines: trim, lowercase, drop blanks and
    anything that isn't plain a-z. file order is kept.
    """
    words = []

    for line in lines:
        word = line.strip().lower()
        if all([
            len(word) > 0,
            set(word) <= ALPHABET,      # no apostrophes, digits, accents
        ]):
            words.append(word)

    return tuple(words)

def is_url(source):
    return isinstance(source, str) and source.startswith(('http://', 'https://'))

def fetch_lines(url, timeout=30):
    req = urllib.request.Request(url, headers={'User-Agent': 'wordpuzzle'})

    with urllib.request.urlopen(req, timeout=timeout) as resp:
        status = getattr(resp, 'status', 200)
        if status != 200:
            raise ValueError(f"unexpected status {status} from {url}")
        return resp.read().decode('utf-8', errors='replace').splitlines()

def file_lines(path):
    with pathlib.Path(path).open(encoding='utf-8', errors='replace') as f:
        return f.read().splitlines()


class Dictionary:
    """
    an immutable, already loaded word list

    `failed` is set when the source couldn't be read, in which case `words`
    is empty. callers check the flag, an empty word list on its own is
    still a perfectly good dictionary.
    """

    def __init__(self, words=(), source=None, failed=False):
        self._words = tuple(words)
        self.source = source
        self.failed = failed

    @property
    def words(self):
        return self._words

    @property
    def length(self):
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __len__(self):
        return self.length

    def __repr__(self):
        state = 'failed' if self.failed else f"{self.length} words"
        return f"<Dictionary {self.source} ({state})>"

    @classmethod
    def load(cls, source=DEFAULT_URL):
        try:
            if is_url(source):
                logger.info(f"fetching dictionary from {source}")
                lines = fetch_lines(source)
            else:
                logger.debug(f"reading dictionary file {source}")
                lines = file_lines(source)
        except (OSError, urllib.error.URLError, ValueError) as e:
            logger.error(f"error loading dictionary {source}: {e}")
            return cls(source=source, failed=True)

        logger.debug(f"dictionary contains {len(lines)} lines")
        words = read_words(lines)
        logger.debug(f"our word list contains {len(words)} words")

        return cls(words, source=source)

def load_dictionary(source=DEFAULT_URL):
    return Dictionary.load(source)

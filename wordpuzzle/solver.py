import re
import collections

import logging
logger = logging.getLogger()

WILDCARD = '*'
NO_HINT  = 'No hints available'
HINT_LEN = 2

_not_pattern = re.compile(r'[^a-zA-Z*]')

def normalize_pattern(text):
    """
    keep only ascii letters and wildcards, lowercased
    eg. 'C * t!' -> 'c*t'
    """
    if not text:
        return ''

    return _not_pattern.sub('', text).lower()

def letter_multiset(pattern):
    """
    split a pattern into (letter counts, wildcard count)
    """
    letters = collections.Counter(c for c in pattern if c != WILDCARD)
    return letters, pattern.count(WILDCARD)

def within_bounds(word, min_length=None, max_length=None):
    """
    inclusive length check, None means no bound on that side
    """
    if min_length is not None and len(word) < min_length:
        return False

    if max_length is not None and len(word) > max_length:
        return False

    return True

def can_form(word, letters, wildcards):
    """
    can `word` be spelled by using up pattern letters and wildcards, each at
    most once? exact letters are consumed before wildcards. the word doesn't
    have to use every letter, eg. 'at' can be formed from 'cat'.
    """
    available = letters.copy()
    remaining = wildcards

    for c in word:
        if available[c] > 0:
            available[c] -= 1
        elif remaining > 0:
            remaining -= 1
        else:
            return False

    return True

def solve(text, dictionary, min_length=None, max_length=None):
    """
    every word in `dictionary` that can be made from the pattern in `text`
    and fits the length bounds, in dictionary order
    """
    if not text:
        return []

    pattern = normalize_pattern(text)
    letters, wildcards = letter_multiset(pattern)
    logger.debug(f"{pattern=} letters={''.join(sorted(letters.elements()))} {wildcards=}")

    return [
        word for word in dictionary
        if within_bounds(word, min_length, max_length)
        and can_form(word, letters, wildcards)
    ]

def hint(text, dictionary, min_length=None, max_length=None):
    """
    first couple of letters of the first match, never the whole word
    """
    matches = solve(text, dictionary, min_length, max_length)

    if not matches:
        return NO_HINT

    # slicing clamps, a one letter word hints as itself
    return matches[0][:HINT_LEN] + '...'


class Solver:
    """
    thin handle binding a loaded dictionary to the matching functions
    """

    def __init__(self, dictionary):
        self.dictionary = dictionary

    @property
    def words(self):
        return self.dictionary

    @property
    def length(self):
        return len(self.words)

    def solve(self, text, min_length=None, max_length=None):
        matches = solve(text, self.words, min_length, max_length)
        logger.debug(f"{len(matches)} of {self.length} words match {text!r}")
        return matches

    def hint(self, text, min_length=None, max_length=None):
        return hint(text, self.words, min_length, max_length)

# The wordlist: 65536 sorted unique words of 1-32 ASCII letters, 16 bits of entropy per word
import re
from bisect import bisect_left
from functools import lru_cache

from wordbytes import path
from wordbytes.exceptions import WordlistError

WORDLIST_SIZE = 1 << 16
MAX_WORD_LENGTH = 32

_wordre = re.compile(f"^[A-Za-z]{{1,{MAX_WORD_LENGTH}}}$")


class Wordlist:
  """Read-only word sequence where wordlist[i] is the word for the 16-bit index i."""

  __slots__ = ("words",)

  def __init__(self, words):
    self.words = tuple(words)

  def __getitem__(self, i):
    return self.words[i]

  def __len__(self):
    return len(self.words)

  def __iter__(self):
    return iter(self.words)

  def __repr__(self):
    return f"<Wordlist of {len(self.words)} words>"

  def index(self, word: str):
    """Binary search for a word (case insensitive). Returns None if not found."""
    word = word.lower()
    i = bisect_left(self.words, word)
    if i < len(self.words) and self.words[i] == word:
      return i
    return None


def verify(words) -> None:
  """Check the structural requirements of a wordlist, raising WordlistError on the first violation."""
  if len(words) != WORDLIST_SIZE:
    raise WordlistError(f"Wordlist must have exactly {WORDLIST_SIZE} words, got {len(words)}")
  prev = None
  for i, w in enumerate(words):
    if not isinstance(w, str) or not _wordre.match(w):
      raise WordlistError(f"Invalid word {w!r} at index {i}: only 1-{MAX_WORD_LENGTH} letters A-Z allowed")
    # Strictly increasing also means no duplicates
    if prev is not None and w <= prev:
      raise WordlistError(f"Wordlist is not sorted or has duplicates at index {i}: {prev!r} >= {w!r}")
    prev = w


def parse(text: str) -> Wordlist:
  """One word per line, surrounding whitespace and empty lines ignored."""
  return Wordlist(line for l in text.splitlines() if (line := l.strip()))


def load(filename=None) -> Wordlist:
  """Load the wordlist once, from the given file or the configured location (see wordbytes.path)."""
  return _load(path.wordlist_path(filename))


@lru_cache(maxsize=None)
def _load(p) -> Wordlist:
  try:
    text = p.read_text(encoding="ascii")
  except UnicodeDecodeError:
    raise WordlistError(f"Wordlist {p} is not ASCII text")
  wl = parse(text)
  if len(wl) != WORDLIST_SIZE:
    raise WordlistError(f"Wordlist {p} must have exactly {WORDLIST_SIZE} words, got {len(wl)}")
  return wl

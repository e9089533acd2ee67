from itertools import product
from string import ascii_lowercase

import pytest

from wordbytes import codec, path, wordlist
from wordbytes.exceptions import WordlistError

SPECIAL_WORDS = {"a", "accompanying", "pad", "safely", "zyzzyva"}


def make_words() -> list:
  """A valid 65536-word list: the special words plus four-letter words aaaa, aaab, ..."""
  words = set(SPECIAL_WORDS)
  for letters in product(ascii_lowercase, repeat=4):
    if len(words) == wordlist.WORDLIST_SIZE:
      break
    words.add("".join(letters))
  return sorted(words)


@pytest.fixture(scope="session")
def words():
  return make_words()


@pytest.fixture(scope="session")
def wl(words):
  return wordlist.Wordlist(words)


@pytest.fixture
def cdc(wl):
  return codec.Codec(wl)


@pytest.fixture(scope="session")
def wordlist_file(tmp_path_factory, words):
  fn = tmp_path_factory.mktemp("data") / "wordlist.txt"
  fn.write_text("\n".join(words) + "\n")
  return fn


@pytest.fixture
def clear_caches():
  wordlist._load.cache_clear()
  codec.default_codec.cache_clear()
  yield
  wordlist._load.cache_clear()
  codec.default_codec.cache_clear()


@pytest.fixture
def installed_wordlist(monkeypatch, clear_caches, wordlist_file):
  """Make the synthetic list the configured default."""
  monkeypatch.setenv(path.ENVVAR, str(wordlist_file))
  return wordlist_file


@pytest.fixture
def real_wordlist(clear_caches):
  """The standard wordlist if one is installed or configured, otherwise skip."""
  try:
    wl = wordlist.load()
  except WordlistError:
    pytest.skip("standard wordlist not installed")
  if wl[0] != "a" or wl[-1] != "zyzzyva" or wl.index("billet") is None:
    pytest.skip("configured wordlist is not the standard one")
  return wl

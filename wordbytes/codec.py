import re
import secrets
from functools import lru_cache

from wordbytes import padding, wordlist
from wordbytes.exceptions import InvalidArgument

MIN_PASSPHRASE_ENTROPY_BYTES = 2
MAX_PASSPHRASE_ENTROPY_BYTES = 1024
MAX_PASSPHRASE_WORDS = MAX_PASSPHRASE_ENTROPY_BYTES // 2
# The longest odd-length input grows by the marker
MAX_PADDED_WORDS = (MAX_PASSPHRASE_ENTROPY_BYTES - 1 + padding.PAD_LENGTH) // 2

_wordre = re.compile(f"[a-zA-Z]{{1,{wordlist.MAX_WORD_LENGTH}}}")
_spacere = re.compile(r"\s+")
_junkre = re.compile(r"[^a-zA-Z ]")


def tokenize(text: str) -> list:
  """Split a passphrase into words on any whitespace, dropping characters other than letters."""
  text = _spacere.sub(" ", text).strip()
  return _junkre.sub("", text).split(" ")


class Codec:
  """Passphrase encoder/decoder bound to one wordlist and a source of random bytes."""

  def __init__(self, words: wordlist.Wordlist, randbytes=secrets.token_bytes):
    self.wordlist = words
    self.randbytes = randbytes
    self.marker = padding.pad_marker(words)
    # The last two words of any padded passphrase
    self.padtail = [words[int.from_bytes(self.marker[i:i + 2], "big")] for i in (1, 3)]

  def bytes_to_passphrase(self, data, as_string=False):
    """Encode bytes as words, two bytes per word, padding odd-length data.

    Returns a list of words, or a space-separated string if as_string is set.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
      raise InvalidArgument("bytes argument must be a bytes-like object")
    data = bytes(data)
    if len(data) > MAX_PASSPHRASE_ENTROPY_BYTES:
      raise InvalidArgument(f"bytes argument must be no longer than {MAX_PASSPHRASE_ENTROPY_BYTES} bytes")
    data = padding.pad(data, self.marker)
    words = [self.wordlist[data[i] << 8 | data[i + 1]] for i in range(0, len(data), 2)]
    return " ".join(words) if as_string else words

  def passphrase_to_bytes(self, passphrase) -> bytes:
    """Decode a list of words, or a string of words separated by whitespace, back to bytes."""
    if isinstance(passphrase, str):
      passphrase = tokenize(passphrase)
    if not isinstance(passphrase, (list, tuple)):
      raise InvalidArgument("passphrase must be an array, or a string with words delimited by spaces")
    if not passphrase:
      raise InvalidArgument("passphrase must have at least one word")
    if not all(isinstance(w, str) for w in passphrase):
      raise InvalidArgument("passphrase must be an array of strings")
    if not all(_wordre.fullmatch(w) for w in passphrase):
      raise InvalidArgument(
        "passphrase words must contain only A-Z, case insensitive, "
        f"and be no longer than {wordlist.MAX_WORD_LENGTH} characters"
      )
    if len(passphrase) > MAX_PASSPHRASE_WORDS and not self._padded(passphrase):
      raise InvalidArgument(f"passphrase must be no longer than {MAX_PASSPHRASE_WORDS} words")
    data = bytearray()
    for word in passphrase:
      i = self.wordlist.index(word)
      if i is None:
        raise InvalidArgument(f"passphrase has an invalid word: {word}")
      data += i.to_bytes(2, "big")
    return padding.unpad(bytes(data), self.marker)

  def generate_passphrase(self, byte_len: int, as_string=False):
    """Random passphrase of byte_len bytes of entropy (byte_len / 2 words)."""
    if (
      not isinstance(byte_len, int) or isinstance(byte_len, bool) or byte_len % 2 or
      not MIN_PASSPHRASE_ENTROPY_BYTES <= byte_len <= MAX_PASSPHRASE_ENTROPY_BYTES
    ):
      raise InvalidArgument(
        f"byte_len must be an even number between {MIN_PASSPHRASE_ENTROPY_BYTES} and {MAX_PASSPHRASE_ENTROPY_BYTES}"
      )
    return self.bytes_to_passphrase(self.randbytes(byte_len), as_string)

  def _padded(self, passphrase) -> bool:
    """A padded passphrase may exceed the word limit by the marker's words."""
    if len(passphrase) > MAX_PADDED_WORDS:
      return False
    *_, lead, pad1, pad2 = passphrase
    if [pad1.lower(), pad2.lower()] != self.padtail:
      return False
    # The marker begins with the low byte of the word before the tail
    i = self.wordlist.index(lead)
    return i is not None and i & 0xFF == self.marker[0]


@lru_cache(maxsize=None)
def default_codec() -> Codec:
  """Codec over the configured wordlist, created on first use."""
  return Codec(wordlist.load())


def bytes_to_passphrase(data, as_string=False):
  return default_codec().bytes_to_passphrase(data, as_string)


def passphrase_to_bytes(passphrase) -> bytes:
  return default_codec().passphrase_to_bytes(passphrase)


def generate_passphrase(byte_len: int, as_string=False):
  return default_codec().generate_passphrase(byte_len, as_string)

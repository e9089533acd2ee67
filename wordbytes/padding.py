"""Padding of odd-length data to a whole number of words.

The marker is the byte form of the phrase "accompanying pad safely" with the
high byte of the first word left out, so that any padded passphrase ends with
"pad safely". In the standard wordlist "accompanying" is among the first 256
words, and thus a zero byte followed by the marker reads "accompanying pad
safely". Genuine data that happens to end with the marker cannot be told apart
from padding; such data does not round-trip.
"""
from wordbytes.exceptions import WordlistError

PAD_LENGTH = 5
PAD_WORDS = ("accompanying", "pad", "safely")


def pad_marker(wordlist) -> bytes:
  """The 5-byte pad marker for the given wordlist."""
  idx = []
  for w in PAD_WORDS:
    i = wordlist.index(w)
    if i is None:
      raise WordlistError(f"Wordlist lacks the padding word {w!r}")
    idx.append(i)
  first, *rest = idx
  return bytes([first & 0xFF]) + b"".join(i.to_bytes(2, "big") for i in rest)


def pad(data: bytes, marker: bytes) -> bytes:
  """Append the marker to odd-length data, even-length data is returned as is."""
  if len(data) % 2:
    return bytes(data) + marker
  return data


def unpad(data: bytes, marker: bytes) -> bytes:
  """Remove a trailing marker if there is one."""
  if len(data) >= len(marker) and data.endswith(marker):
    return data[:-len(marker)]
  return data

"""Known values with the standard wordlist (skipped unless it is installed)."""
import pytest

import wordbytes
from wordbytes import wordlist

SAMPLE = bytes([0, 0, 17, 212, 12, 140, 90, 247, 46, 83, 254, 60, 54, 169, 255, 255])
SAMPLE_WORDS = "a billet baiting glum crawl writhing deplane zyzzyva"


def test_structure(real_wordlist):
  wordlist.verify(real_wordlist.words)


def test_encode(real_wordlist):
  assert wordbytes.bytes_to_passphrase(b"\x00\x00") == ["a"]
  assert wordbytes.bytes_to_passphrase(b"\xff\xff") == ["zyzzyva"]
  assert wordbytes.bytes_to_passphrase(SAMPLE, as_string=True) == SAMPLE_WORDS


def test_encode_padded(real_wordlist):
  assert wordbytes.bytes_to_passphrase(b"\x00\x00\x00", True) == "a accompanying pad safely"
  assert wordbytes.bytes_to_passphrase(b"\xff\xff\xff", True) == "zyzzyva yoked pad safely"
  assert wordbytes.bytes_to_passphrase(SAMPLE + b"\x80", True) == f"{SAMPLE_WORDS} magnify pad safely"


def test_decode(real_wordlist):
  assert wordbytes.passphrase_to_bytes("a") == b"\x00\x00"
  assert wordbytes.passphrase_to_bytes("zyzzyva") == b"\xff\xff"
  assert wordbytes.passphrase_to_bytes(SAMPLE_WORDS) == SAMPLE
  assert wordbytes.passphrase_to_bytes("a accompanying pad safely") == b"\x00\x00\x00"
  assert wordbytes.passphrase_to_bytes("zyzzyva yoked pad safely") == b"\xff\xff\xff"
  assert wordbytes.passphrase_to_bytes(f"{SAMPLE_WORDS} magnify pad safely") == SAMPLE + b"\x80"


@pytest.mark.parametrize(
  "text", [
    "a billet baiting glum",
    "a    billet    baiting    glum",
    " a billet baiting glum ",
    "a\nbillet\nbaiting\nglum",
    "a\tbillet\tbaiting\tglum",
  ]
)
def test_decode_whitespace(real_wordlist, text):
  assert wordbytes.passphrase_to_bytes(text) == bytes([0, 0, 17, 212, 12, 140, 90, 247])


def test_rejections(real_wordlist):
  with pytest.raises(wordbytes.InvalidArgument) as exc:
    wordbytes.passphrase_to_bytes("apple")
  assert str(exc.value) == "passphrase has an invalid word: apple"
  with pytest.raises(wordbytes.InvalidArgument) as exc:
    wordbytes.passphrase_to_bytes([])
  assert str(exc.value) == "passphrase must have at least one word"
  for n in (1, 1026):
    with pytest.raises(wordbytes.InvalidArgument) as exc:
      wordbytes.generate_passphrase(n)
    assert str(exc.value) == "byte_len must be an even number between 2 and 1024"

import sys

import pyperclip

from wordbytes import wordlist
from wordbytes.codec import Codec


def get_codec(args) -> Codec:
  return Codec(wordlist.load(args.wordlist or None))


def read_input(prompt: str) -> str:
  """Read all of stdin, or a single line when it is a terminal."""
  if sys.stdin.isatty():
    sys.stderr.write(f"{prompt}: ")
    sys.stderr.flush()
    return sys.stdin.readline()
  return sys.stdin.read()


def output_words(words: list, args):
  if args.paste:
    pyperclip.copy(" ".join(words))
    sys.stderr.write(f" 📋  Passphrase of {len(words)} words copied to clipboard.\n")
    return
  sep = " " if args.string else "\n"
  sys.stdout.write(sep.join(words) + "\n")

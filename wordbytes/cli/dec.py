import sys

import pyperclip

from wordbytes.cli.util import get_codec, read_input


def main_dec(args):
  codec = get_codec(args)
  if args.params and args.params != ["-"]:
    text = " ".join(args.params)
  elif args.paste:
    text = pyperclip.paste()
  else:
    text = read_input("Passphrase")
  if not text.strip():
    raise KeyboardInterrupt
  sys.stdout.write(codec.passphrase_to_bytes(text).hex() + "\n")

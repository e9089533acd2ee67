import sys

from wordbytes import path, wordlist
from wordbytes.codec import Codec


def main_check(args):
  filename = path.wordlist_path(args.wordlist or None)
  wl = wordlist.load(args.wordlist or None)
  wordlist.verify(wl.words)
  codec = Codec(wl)
  sys.stdout.write(
    f"{filename}: {len(wl)} words, {wl[0]} … {wl[-1]}\n"
    f"Pad marker {codec.marker.hex()} ({' '.join(codec.padtail)})\n"
  )

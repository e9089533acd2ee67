import sys
from typing import NoReturn

import wordbytes
from wordbytes import path

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  gen=f"{C}wordbytes {F}gen {D}[{N}16{D}] [{F}-s{D}] [{F}-A{D}]{N}\n",
  enc=f"{C}wordbytes {F}enc {D}[{N}hexdata {D}|{N} {F}-{D}] [{F}-s{D}] [{F}-A{D}]{N}\n",
  dec=f"{C}wordbytes {F}dec {D}[{N}word{D}]… [{F}-A{D}]{N}\n",
  check=f"{C}wordbytes {F}check {D}—{N} verify the wordlist in use\n",
  bench=f"{C}wordbytes {F}bench {D}[{N}10000{D}] —{N} measure encoding and decoding speed\n",
)

usagetext = dict(
  gen=f"""\
Generate a passphrase from the given number of random bytes (even, 2 to 1024).
Each word carries 16 bits, so the default of 16 bytes makes eight words.

  {F}-s --string{N}       Print the words on one line (default one per line)
  {F}-A{N}                Copy the passphrase to clipboard instead of printing
""",
  enc=f"""\
Encode hex data as a passphrase. Data is read from stdin if not given on the
command line or if {F}-{N} is given. Odd-length data is padded and the passphrase
then ends in the words "pad safely".

  {F}-s --string{N}       Print the words on one line (default one per line)
  {F}-A{N}                Copy the passphrase to clipboard instead of printing
""",
  dec=f"""\
Decode a passphrase back into data, printed in hex. Words are read from stdin if
none are given. Any whitespace separates words and case is ignored.

  {F}-A{N}                Paste the passphrase from clipboard
""",
  check=f"""\
Load the wordlist and verify that it has 65536 sorted unique words of at most
32 letters. The first of these is used:

  1. {F}-w --wordlist{N} FILE option
  2. {H}{path.ENVVAR}{N} environment variable
  3. {path.userwordlist}
  4. the wordlist installed with the package
""",
  bench=f"""\
Time each operation the given number of rounds on 32 bytes of data, and a
round trip of a random passphrase through decoding and encoding again.
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"Wordbytes {wordbytes.__version__} - Binary data as passphrase words"

introduction = f"""\
{T}{introduction:78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
All commands take {F}-w --wordlist{N} FILE to use another wordlist, and {F}--debug{N} to
show tracebacks on errors. Help applies to subcommands too.
"""

exampleshelp = f"""\
{H}Examples:{N}

* A new passphrase of 128 bits:
  - {C}wordbytes {F}gen -s{N} 16

* Hex data to words and back:
  - {C}wordbytes {F}enc -s{N} 0000ffff              prints: a zyzzyva
  - {C}wordbytes {F}dec{N} a zyzzyva                prints: 0000ffff
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}
{exampleshelp}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"Wordbytes {wordbytes.__version__}")
  sys.exit(0)

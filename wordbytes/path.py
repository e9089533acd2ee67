import os
from importlib.resources import files
from pathlib import Path

from xdg import xdg_data_home

from wordbytes.exceptions import WordlistError

ENVVAR = "WORDBYTES_WORDLIST"
datadir = xdg_data_home() / "wordbytes"
userwordlist = datadir / "wordlist.txt"
pkgwordlist = files("wordbytes") / "data" / "wordlist.txt"


def candidates(path=None) -> list:
  """Wordlist locations in order of preference."""
  if path is not None:
    return [Path(path)]
  found = []
  if env := os.environ.get(ENVVAR):
    found.append(Path(env))
  found.append(userwordlist)
  found.append(pkgwordlist)
  return found


def wordlist_path(path=None):
  """Return the first existing wordlist location."""
  places = candidates(path)
  for p in places:
    if p.is_file():
      return p
  tried = ", ".join(str(p) for p in places)
  raise WordlistError(f"Wordlist not found (looked in {tried}). Set {ENVVAR} or use --wordlist FILE.")

from wordbytes.cli.util import get_codec, output_words
from wordbytes.exceptions import CliArgError

DEFAULT_BYTES = 16


def main_gen(args):
  if len(args.params) > 1:
    raise CliArgError("Only one byte count may be specified.")
  n = args.params[0] if args.params else DEFAULT_BYTES
  try:
    n = int(n)
  except ValueError:
    raise CliArgError(f"Invalid byte count {n!r}, expected a number.")
  output_words(get_codec(args).generate_passphrase(n), args)

import sys
from typing import NoReturn

import colorama

from wordbytes.cli.args import argparse
from wordbytes.cli.bench import main_bench
from wordbytes.cli.check import main_check
from wordbytes.cli.dec import main_dec
from wordbytes.cli.enc import main_enc
from wordbytes.cli.gen import main_gen
from wordbytes.exceptions import CliArgError

modes = {
  "gen": main_gen,
  "enc": main_enc,
  "dec": main_dec,
  "check": main_check,
  "bench": main_bench,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling wordbytes.bytes_to_passphrase etc. directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted (also empty input)
  * 3 I/O error (broken pipe)
  * 10 Invalid data or passphrase, missing or invalid wordlist

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  args = argparse()

  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)
  except CliArgError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(1)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()

from time import perf_counter

from wordbytes.cli.util import get_codec
from wordbytes.exceptions import CliArgError

DEFAULT_ROUNDS = 10000
SAMPLE = bytes([
  65, 87, 174, 214, 214, 199, 62, 136, 175, 4, 14, 27, 4, 76, 71, 107, 164, 220, 153, 35, 107, 76, 35, 171, 96, 187,
  249, 128, 173, 211, 144, 224
])


def main_bench(args):
  if len(args.params) > 1:
    raise CliArgError("Only one round count may be specified.")
  rounds = args.params[0] if args.params else DEFAULT_ROUNDS
  try:
    rounds = int(rounds)
  except ValueError:
    raise CliArgError(f"Invalid round count {rounds!r}, expected a number.")
  if rounds < 1:
    raise CliArgError("The round count must be at least 1.")

  codec = get_codec(args)
  words = codec.bytes_to_passphrase(SAMPLE)

  def roundtrip():
    pw = codec.generate_passphrase(len(SAMPLE))
    if codec.bytes_to_passphrase(codec.passphrase_to_bytes(pw)) != pw:
      raise ValueError(f"Round trip failed for {' '.join(pw)}")

  tests = [
    ("generate_passphrase", lambda: codec.generate_passphrase(len(SAMPLE))),
    ("passphrase_to_bytes", lambda: codec.passphrase_to_bytes(words)),
    ("bytes_to_passphrase", lambda: codec.bytes_to_passphrase(SAMPLE)),
    ("round-trip", roundtrip),
  ]
  for name, func in tests:
    print(f"{name:20}", end="", flush=True)
    t0 = perf_counter()
    for i in range(rounds):
      func()
    dur = (perf_counter() - t0) / rounds
    print(f"{1 / dur:10.0f} ops/s {dur * 1e6:8.1f} µs")
  print(f"\nRan {rounds} rounds of each with {len(SAMPLE)} bytes ({len(words)} words).")

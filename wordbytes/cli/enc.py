from wordbytes import util
from wordbytes.cli.util import get_codec, output_words, read_input


def main_enc(args):
  codec = get_codec(args)
  if not args.params or args.params == ["-"]:
    text = read_input("Hex data")
  else:
    text = " ".join(args.params)
  data = util.hex_decode(text)
  # No words would be output, and no words cannot be decoded
  if not data:
    raise ValueError("No data to encode.")
  output_words(codec.bytes_to_passphrase(data), args)

import re

_hexre = re.compile("[0-9A-Fa-f]*")


def hex_decode(data: str) -> bytes:
  """Hex decode, tolerating surrounding whitespace, 0x prefix and spaces or colons between digits."""
  data = data.strip('\uFEFF` \t\r\n')
  if data[:2].lower() == "0x":
    data = data[2:]
  data = re.sub(r"[\s:]", "", data)
  if not _hexre.fullmatch(data):
    raise ValueError("Invalid hex encoding: unrecognized characters")
  if len(data) % 2:
    raise ValueError(f"Invalid hex encoding: odd number of digits ({len(data)})")
  return bytes.fromhex(data)

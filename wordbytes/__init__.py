from importlib.metadata import PackageNotFoundError, version

try:
  __version__ = version("wordbytes")
except PackageNotFoundError:
  __version__ = "0+unknown"

from wordbytes.codec import (
  MAX_PASSPHRASE_ENTROPY_BYTES, MIN_PASSPHRASE_ENTROPY_BYTES, Codec, bytes_to_passphrase, generate_passphrase,
  passphrase_to_bytes
)
from wordbytes.exceptions import InvalidArgument, WordlistError

class InvalidArgument(ValueError):
  """Argument has the wrong type, is out of range or cannot be decoded"""

class WordlistError(ValueError):
  """Wordlist asset is missing or does not have the required structure"""

class CliArgError(ValueError):
  """Invalid CLI argument"""

class RollsumError(Exception):
  """Base class for errors raised by rollsum."""


class InvalidConfiguration(RollsumError, ValueError):
  """Raised when a checksum or scan is configured with unusable parameters."""


class InvalidDigest(RollsumError, ValueError):
  """Raised when a serialized digest cannot be decoded."""

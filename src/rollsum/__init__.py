from .adler32 import DIGEST_SIZE, MAX_WINDOW_SIZE, MOD, checksum, pack, unpack
from .error import InvalidConfiguration, InvalidDigest, RollsumError
from .report import ChecksumReport
from .rolling_checksum import RollingChecksum, rolling_digests
from .scan import scan_path, scan_stream

__all__ = [
  'DIGEST_SIZE',
  'MAX_WINDOW_SIZE',
  'MOD',
  'ChecksumReport',
  'InvalidConfiguration',
  'InvalidDigest',
  'RollingChecksum',
  'RollsumError',
  'checksum',
  'pack',
  'rolling_digests',
  'scan_path',
  'scan_stream',
  'unpack',
]

# Fixed by the authenticator app contract, not configurable per call
CODE_DIGITS = 6
TIME_STEP = 30  # seconds
ALGORITHM = 'SHA1'

SECRET_LENGTH = 32  # base32 characters, 160 bits
BACKUP_CODE_COUNT = 10
BACKUP_CODE_DIGITS = 6

import os

from decouple import Choices, config

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
BASE_MODULE = 'enrollment'

DEBUG = config('DEBUG', default=False, cast=bool)
ENVIRONMENT = config('ENVIRONMENT', default='local', cast=Choices(['local', 'testing', 'staging', 'production']))
IS_LOCAL = ENVIRONMENT == 'local'
IS_PRODUCTION = ENVIRONMENT == 'production'
IS_STAGING = ENVIRONMENT == 'staging'
IS_TESTING = ENVIRONMENT == 'testing'  # Set in tests/conftest.py
IS_DEPLOYED_ENV = IS_PRODUCTION or IS_STAGING

LOG_LEVEL = config('LOG_LEVEL', 'INFO')

DATABASE_URL = config('DATABASE_URL', default=f"sqlite:///{os.path.join(BASE_DIR, 'enrollment.db')}")
DB_LOG_STATEMENTS = config('DB_LOG_STATEMENTS', default=False, cast=bool)
DB_ENCRYPTION_KEY = config('DB_ENCRYPTION_KEY', default='default-key')
DB_ENCRYPTION_SALT = config('DB_ENCRYPTION_SALT', default='enrollment-encryption-salt')

# Appears as the account issuer in authenticator apps
MFA_ISSUER = config('MFA_ISSUER', default='EnrollmentAPI')
# The status payload has always carried the raw secret, turn this off to redact it
MFA_STATUS_INCLUDE_SECRET = config('MFA_STATUS_INCLUDE_SECRET', default=True, cast=bool)

# Modules with a `models.py` that must be imported before the mapper is used
BOUNDARIES = [
    'core.customer',
]

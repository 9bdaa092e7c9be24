import os
import sys
from datetime import datetime

# Test Environment Overrides will override .env files
# THESE MUST BE IMPORTED BEFORE ANYTHING
EXPECTED_ENVIRONMENT = 'testing'
os.environ.setdefault('ENVIRONMENT', 'testing')
os.environ.setdefault('DATABASE_URL', 'sqlite://')
os.environ.setdefault('DB_ENCRYPTION_KEY', 'test-encryption-key')
os.environ.setdefault('DB_ENCRYPTION_SALT', 'test-salt')
os.environ.setdefault('MFA_ISSUER', 'EnrollmentAPI')
os.environ.setdefault('LOG_LEVEL', 'DEBUG')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from enrollment import setup

setup.run()
setup.create_tables()

import pytest

from enrollment import settings
from enrollment.core.customer import Customer, CustomerRead
from enrollment.core.mfa import MfaService
from enrollment.network.database.session import db as session_manager
from tests.factories.core.mfa import FrozenClock

# Add fixtures here
pytest_plugins = [
    'tests.factories.core.customer',
]

# ruff: noqa: E402

# When enrollment is imported before the above patching, tests will use
# a real database and a real encryption key.
if settings.ENVIRONMENT != EXPECTED_ENVIRONMENT:
    raise ValueError(
        'Patching of environment variables failed.\n'
        'This will cause unexpected test failures'
        'Check all enrollment imports are delayed until after patching.\n'
    )


@pytest.fixture(scope='function', autouse=True)
def db():
    with session_manager(commit_on_success=False):
        yield session_manager.session


@pytest.fixture(scope='function')
def frozen_clock() -> FrozenClock:
    # Start of a 30 second step so ticks under 30s stay inside it
    return FrozenClock(datetime(2024, 1, 15, 12, 0, 0))


@pytest.fixture(scope='function')
def mfa_service(frozen_clock) -> MfaService:
    return MfaService(clock=frozen_clock)


@pytest.fixture(scope='function')
def customer(customer_factory) -> CustomerRead:
    """
    Creates a test customer.
    """
    customer_data = customer_factory.build()
    return Customer.create(customer_data)


@pytest.fixture(scope='function')
def enrolled_customer(customer_factory) -> CustomerRead:
    """
    The customer the enrollment wizard examples are written against
    """
    customer_data = customer_factory.build(
        first_name='John',
        last_name='Doe',
        email='john.doe@example.com',
        account_number='1234567890123456',
        ssn='123456789',
        date_of_birth=datetime(1990, 1, 1).date(),
    )
    return Customer.create(customer_data)

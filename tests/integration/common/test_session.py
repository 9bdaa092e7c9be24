import contextvars

import pytest

from enrollment.core.customer import Customer
from enrollment.network.database.session import SessionNotAvailable
from enrollment.network.database.session import db as session_manager


class TestSessionManager:
    def test_nested_scope_shares_session(self, db, customer):
        with session_manager(commit_on_success=True) as nested:
            assert nested.session is db
            Customer.update(id=customer.id, first_name='Nested')

        # The nested scope neither committed nor closed the outer session
        assert session_manager.session is db
        assert db.in_transaction()
        assert Customer.get(id=customer.id).first_name == 'Nested'

    def test_nested_scope_error_leaves_outer_open(self, db):
        with pytest.raises(RuntimeError):
            with session_manager():
                raise RuntimeError('boom')

        assert session_manager.session is db

    def test_no_session_outside_scope(self):
        def read_session():
            return session_manager.session

        with pytest.raises(SessionNotAvailable):
            contextvars.Context().run(read_session)

    def test_scope_opened_in_fresh_context(self):
        def open_scope():
            with session_manager() as scope:
                return scope.session is not None

        assert contextvars.Context().run(open_scope) is True

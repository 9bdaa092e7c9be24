import time
from contextvars import ContextVar
from typing import Any, Dict, Optional

from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.orm.session import Session as SqlAlchemySession
from sqlalchemy.pool import StaticPool

from enrollment import settings


def create_db_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() == 'sqlite':
        engine_kwargs: Dict[str, Any] = {'connect_args': {'check_same_thread': False}}
        if url.database in (None, '', ':memory:'):
            # In memory databases only live as long as their single connection
            engine_kwargs['poolclass'] = StaticPool
        return create_engine(url, **engine_kwargs)

    return create_engine(
        url,
        pool_pre_ping=True,  # Verify connections before use
    )


engine = create_db_engine(settings.DATABASE_URL)

_session_maker = sessionmaker(autocommit=False, autoflush=False, bind=engine)

if settings.DB_LOG_STATEMENTS:
    # Log statements and their execution times
    @event.listens_for(Engine, 'before_cursor_execute')
    def before_cursor_execute(
        conn: Any, cursor: Any, statement: str, parameters: Any, context: Any, executemany: bool
    ) -> None:
        conn.info.setdefault('query_start_time', []).append(time.time())
        logger.info(f'Start Query: {statement}')

    @event.listens_for(Engine, 'after_cursor_execute')
    def after_cursor_execute(
        conn: Any, cursor: Any, statement: str, parameters: Any, context: Any, executemany: bool
    ) -> None:
        total = time.time() - conn.info['query_start_time'].pop(-1)
        logger.info(f'Query Time: {total}')


# Should be thread safe as well as coroutine safe!
_session_storage: ContextVar[SqlAlchemySession | None] = ContextVar('_session_storage', default=None)


class SessionNotAvailable(Exception):
    def __init__(self) -> None:
        msg = """
        You need to create a session context by using a `db` instance as a context manager e.g.:
        with db(commit_on_success=True):
            CustomerService.factory().get_for_id(customer_id)
        """
        super().__init__(msg)


class SessionManagerMeta(type):
    """
    Access session as a property on context manager
    without having to init
    """

    @property
    def session(self) -> SqlAlchemySession:
        """
        Make a thread and coroutine safe session
        """
        session = _session_storage.get()
        if session is None:
            raise SessionNotAvailable

        return session


class SessionManager(metaclass=SessionManagerMeta):
    def __init__(
        self,
        session_kwargs: Dict[str, Any] | None = None,
        commit_on_success: bool = False,
    ):
        self.session_token: Optional[Any] = None
        self.session_kwargs = session_kwargs or {}
        self.commit_on_success = commit_on_success

    def __enter__(self) -> Any:
        # Nested scopes (e.g. a service call inside a test transaction) share the
        # outermost session so everything rolls back together
        if _session_storage.get() is None:
            session = _session_maker(**self.session_kwargs)
            self.session_token = _session_storage.set(session)

        return type(self)

    def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
        if self.session_token is None:
            # Only the scope that opened the session finishes it
            return

        session = _session_storage.get()
        is_success = exc_type is None

        if session is not None:
            if self.commit_on_success and is_success:
                session.commit()
            else:
                session.rollback()
            session.close()

        _session_storage.reset(self.session_token)
        self.session_token = None


# This is what external callers should access!
db: SessionManagerMeta = SessionManager

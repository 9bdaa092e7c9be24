from enrollment.common.exceptions import InternalException


class RepositoryObjectNotFound(InternalException):
    """
    Wraps sqlalchemy NoResultFound for lookups expecting exactly one row
    """

    ...


class MultipleRepositoryObjectsFound(InternalException):
    """
    Wraps sqlalchemy MultipleResultsFound for lookups expecting exactly one row
    """

    ...

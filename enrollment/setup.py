def run():
    """
    Run before every entry point:
        service scripts
        test session
        ipython shell
    """
    from loguru import logger

    from enrollment.common.logs import configure_logging

    configure_logging()
    configure_models()

    logger.info('application setup complete ✅')


def configure_models():
    """
    When using declarative we need to run this for our entry points
    to have context on our models / relationships example when
    traversing "customer.id" as a foreign key
    """
    from enrollment.common.model import import_model_modules

    import_model_modules()


def create_tables():
    """
    Creates any missing tables for the registered models. Migrations are owned by
    the persistence collaborator, this exists for local databases and tests.
    """
    from enrollment.common.model import BaseModel
    from enrollment.network.database.session import engine

    configure_models()
    BaseModel.metadata.create_all(engine)

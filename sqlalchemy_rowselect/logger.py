import logging

logger = logging.getLogger("sqlalchemy_rowselect")
logger.addHandler(logging.NullHandler())

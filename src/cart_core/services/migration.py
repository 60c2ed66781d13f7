"""Apply the carts schema with Alembic — invoked via the migrate Lambda.

The database URL is resolved the same way CartStore connects (config values, or
the Secrets Manager secret when one is configured) and handed to Alembic
directly, so env.py never has to re-read credentials.
"""

import io
import logging
import os

from alembic.config import Config as AlembicConfig

from alembic import command
from cart_core.config import Config, get_config
from cart_core.db.carts import CartStore

logger = logging.getLogger(__name__)

ALEMBIC_INI = os.environ.get("ALEMBIC_INI", "/var/task/alembic.ini")
ALEMBIC_SCRIPT_LOCATION = os.environ.get("ALEMBIC_SCRIPT_LOCATION", "/var/task/alembic")


def alembic_config(config: Config) -> AlembicConfig:
    cfg = AlembicConfig(ALEMBIC_INI)
    cfg.set_main_option("script_location", ALEMBIC_SCRIPT_LOCATION)
    # Alembic options go through ConfigParser interpolation
    cfg.set_main_option("sqlalchemy.url", CartStore(config).sqlalchemy_url().replace("%", "%%"))
    return cfg


def run_migrations(config: Config | None = None, revision: str = "head") -> dict[str, str]:
    cfg = alembic_config(config or get_config())

    output_buf = io.StringIO()
    stream_handler = logging.StreamHandler(output_buf)
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.addHandler(stream_handler)

    try:
        command.upgrade(cfg, revision)
        output = output_buf.getvalue()
        logger.info("Migrated carts schema to %s: %s", revision, output)
        return {"status": "success", "revision": revision, "output": output}
    except Exception:
        logger.exception("Carts schema migration to %s failed", revision)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)

from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool, create_engine

from app.core.config import settings
from app.db.session import Base

# Every model module must be imported so its table lands in Base.metadata
from app.models.user import User  # noqa: F401
from app.models.airport import Airport  # noqa: F401
from app.models.slab import Slab  # noqa: F401
from app.models.car import Car, CarSlabFare  # noqa: F401
from app.models.common_setting import CommonSetting  # noqa: F401
from app.models.extra_charge import ExtraCharge  # noqa: F401
from app.models.tunnel_charge import TunnelCharge  # noqa: F401
from app.models.sms_service import SmsService  # noqa: F401
from app.models.google_api_key import GoogleApiKey  # noqa: F401

config = context.config

# start_api.py sets the url explicitly; `alembic upgrade` from a shell falls back to settings.
db_url = config.get_main_option("sqlalchemy.url") or settings.DATABASE_URL
config.set_main_option("sqlalchemy.url", db_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(db_url, poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()
    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()

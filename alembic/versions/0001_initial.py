"""initial

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-17

"""

from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _money(name, nullable=False, default="0"):
    if default is None:
        return sa.Column(name, sa.Numeric(10, 2), nullable=True)
    return sa.Column(name, sa.Numeric(10, 2), nullable=nullable, server_default=default)


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _status():
    return sa.Column("status", sa.SmallInteger(), nullable=False, server_default="1")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=False, server_default=""),
        sa.Column("role", sa.String(length=30), nullable=False, server_default="admin"),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_role", "users", ["role"], unique=False)

    op.create_table(
        "airports",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _money("from_tax_toll"),
        _money("to_tax_toll"),
        _status(),
        *_timestamps(),
    )
    op.create_index("ix_airports_name", "airports", ["name"], unique=True)

    op.create_table(
        "slabs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("slab_value", sa.Numeric(10, 2), nullable=False),
        sa.Column("slab_unit", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("slab_type", sa.SmallInteger(), nullable=False, server_default="0"),
        _status(),
        *_timestamps(),
    )

    op.create_table(
        "cars",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("regular_name", sa.String(length=100), nullable=False),
        sa.Column("short_name", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("color", sa.String(length=50), nullable=True),
        sa.Column("car_photo", sa.String(length=255), nullable=True),
        sa.Column("car_features", sa.Text(), nullable=True),
        _money("base_fare"),
        _money("minimum_fare"),
        sa.Column("small_luggage_capacity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("large_luggage_capacity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("extra_luggage_capacity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("num_of_passengers", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("is_child_seat", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        _status(),
        *_timestamps(),
    )

    op.create_table(
        "car_slab_fares",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("car_id", sa.Integer(), sa.ForeignKey("cars.id", ondelete="CASCADE"), nullable=False),
        sa.Column("slab_id", sa.Integer(), sa.ForeignKey("slabs.id", ondelete="CASCADE"), nullable=False),
        sa.Column("fare_amount", sa.Numeric(10, 2), nullable=False),
        _status(),
        *_timestamps(),
    )
    op.create_index("ix_car_slab_fares_car_id", "car_slab_fares", ["car_id"], unique=False)
    op.create_index("ix_car_slab_fares_slab_id", "car_slab_fares", ["slab_id"], unique=False)

    op.create_table(
        "common_settings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("company_name", sa.String(length=100), nullable=False),
        sa.Column("company_logo", sa.String(length=255), nullable=True),
        sa.Column("address", sa.Text(), nullable=False, server_default=""),
        sa.Column("booking_call_number", sa.String(length=20), nullable=True),
        sa.Column("telephone_number", sa.String(length=20), nullable=False, server_default=""),
        sa.Column("email", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("website", sa.String(length=100), nullable=True),
        sa.Column("holidays", sa.Text(), nullable=True),
        _money("holiday_surcharge", default=None),
        *[
            _money(name, nullable=True)
            for name in (
                "tunnel_charge",
                "gratuity",
                "stop_over_charge",
                "infant_front_facing_seat_charge",
                "infant_rear_facing_seat_charge",
                "infant_booster_seat_charge",
                "night_charge",
            )
        ],
        sa.Column("night_charge_start_time", sa.String(length=8), nullable=True),
        sa.Column("night_charge_end_time", sa.String(length=8), nullable=True),
        _money("hidden_night_charge", nullable=True),
        sa.Column("hidden_night_charge_start_time", sa.String(length=8), nullable=True),
        sa.Column("hidden_night_charge_end_time", sa.String(length=8), nullable=True),
        *[
            _money(name, nullable=True)
            for name in (
                "snow_storm_charge",
                "rush_hour_charge",
                "extra_luggage_charge",
                "pets_charge",
                "convenience_fee",
                "cash_discount",
                "paypal_charge",
                "square_charge",
                "credit_card_charge",
            )
        ],
        _status(),
        *_timestamps(),
    )

    op.create_table(
        "extra_charges",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("area_name", sa.String(length=100), nullable=False),
        sa.Column("zip_codes", sa.Text(), nullable=False, server_default=""),
        _money("extra_charge"),
        _money("extra_toll_charge"),
        _status(),
        *_timestamps(),
    )
    op.create_index("ix_extra_charges_area_name", "extra_charges", ["area_name"], unique=False)

    op.create_table(
        "tunnel_charges",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("charge_start_date", sa.Date(), nullable=False),
        sa.Column("charge_end_date", sa.Date(), nullable=False),
        sa.Column("charge_amount", sa.Numeric(10, 2), nullable=False),
        _status(),
        *_timestamps(),
    )

    op.create_table(
        "sms_services",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("phone_number", sa.String(length=20), nullable=False),
        _status(),
        *_timestamps(),
    )

    op.create_table(
        "google_api_keys",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("api_key", sa.String(length=100), nullable=False),
        _status(),
        *_timestamps(),
        sa.UniqueConstraint("api_key", name="uq_google_api_keys_api_key"),
    )


def downgrade() -> None:
    op.drop_table("google_api_keys")
    op.drop_table("sms_services")
    op.drop_table("tunnel_charges")
    op.drop_index("ix_extra_charges_area_name", table_name="extra_charges")
    op.drop_table("extra_charges")
    op.drop_table("common_settings")
    op.drop_index("ix_car_slab_fares_slab_id", table_name="car_slab_fares")
    op.drop_index("ix_car_slab_fares_car_id", table_name="car_slab_fares")
    op.drop_table("car_slab_fares")
    op.drop_table("cars")
    op.drop_table("slabs")
    op.drop_index("ix_airports_name", table_name="airports")
    op.drop_table("airports")
    op.drop_index("ix_users_role", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

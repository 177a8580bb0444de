"""Create vehicles, staff_users and financing_applications

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vehicles",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("kind", sa.String(length=10), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="available"),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("brand", sa.String(length=50), nullable=False),
        sa.Column("model", sa.String(length=100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("price_display", sa.String(length=50), nullable=False, server_default=""),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("colour", sa.String(length=50), nullable=True),
        sa.Column("interior", sa.String(length=100), nullable=True),
        sa.Column("wheel", sa.String(length=100), nullable=True),
        sa.Column("safety", sa.Text(), nullable=True),
        sa.Column("trim", sa.String(length=100), nullable=True),
        sa.Column("stock_number", sa.String(length=50), nullable=True),
        sa.Column("vin", sa.String(length=17), nullable=True),
        sa.Column("top_speed", sa.Numeric(precision=6, scale=1), nullable=True),
        sa.Column("time_to_60", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("mileage", sa.Integer(), nullable=True),
        sa.Column("engine", sa.Numeric(precision=4, scale=1), nullable=True),
        sa.Column("cylinders", sa.Integer(), nullable=True),
        sa.Column("gearbox", sa.String(length=50), nullable=True),
        sa.Column("transmission", sa.String(length=50), nullable=True),
        sa.Column("body", sa.String(length=50), nullable=True),
        sa.Column("drivetrain", sa.String(length=50), nullable=True),
        sa.Column("technology", sa.Text(), nullable=True),
        sa.Column("subtitle", sa.String(length=200), nullable=True),
        sa.Column("range_km", sa.Numeric(precision=7, scale=1), nullable=True),
        sa.Column("range_description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_vehicles_kind_status_created_at", "vehicles", ["kind", "status", "created_at"]
    )
    op.create_index("ix_vehicles_kind_brand", "vehicles", ["kind", "brand"])

    op.create_table(
        "staff_users",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "financing_applications",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("applicant_email", sa.String(length=255), nullable=False),
        sa.Column("applicant_name", sa.String(length=120), nullable=False),
        sa.Column("vehicle_summary", sa.String(length=200), nullable=False),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_financing_applications_email_submitted_at",
        "financing_applications",
        ["applicant_email", "submitted_at"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "ix_financing_applications_email_submitted_at", table_name="financing_applications"
    )
    op.drop_table("financing_applications")
    op.drop_table("staff_users")
    op.drop_index("ix_vehicles_kind_brand", table_name="vehicles")
    op.drop_index("ix_vehicles_kind_status_created_at", table_name="vehicles")
    op.drop_table("vehicles")

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=True),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("vin", sa.String(length=64), nullable=False),
        sa.Column("company", sa.String(length=128), nullable=False),
        sa.Column("status", sa.String(length=64), nullable=True),
        sa.Column("transport_type", sa.String(length=32), nullable=False, server_default="regular"),
        sa.Column("cargo_name", sa.String(length=255), nullable=True),
        sa.Column("cargo_weight", sa.String(length=64), nullable=True),
        sa.Column("cargo_size", sa.String(length=64), nullable=True),
        sa.Column("mintrans_permit", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("escort_received", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("photo", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("now()"), nullable=True),
    )
    op.create_index("ix_vehicles_vin", "vehicles", ["vin"], unique=False)

def downgrade():
    op.drop_index("ix_vehicles_vin", table_name="vehicles")
    op.drop_table("vehicles")

    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")

"""Create user property store table."""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "20261019_0002"
down_revision: str | None = "20261019_0001"
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None

TIMESTAMP_DEFAULT = sa.text("CURRENT_TIMESTAMP")


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("prop_key", sa.String(length=512), nullable=False),
        sa.Column("user_uuid", sa.String(length=40), nullable=False),
        sa.Column("text_value", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=TIMESTAMP_DEFAULT,
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_uuid"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "user_uuid",
            "prop_key",
            name="ux_properties_user_key",
        ),
    )
    op.create_index("ix_properties_prop_key", "properties", ["prop_key"], unique=False)
    op.create_index("ix_properties_user_uuid", "properties", ["user_uuid"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_properties_user_uuid", table_name="properties")
    op.drop_index("ix_properties_prop_key", table_name="properties")
    op.drop_table("properties")

"""Create commerce tables

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates users, products, orders, deliveries and couriers.
How:   UUID primary keys generated by the application, TIMESTAMP WITH TIME
       ZONE for every timestamp, foreign keys with ON DELETE SET NULL.

Rollback: downgrade() drops all five tables (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entity_columns() -> list:
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        *_entity_columns(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])

    op.create_table(
        "products",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.PrimaryKeyConstraint("id"),
        # Backstop for the conditional stock UPDATE
        sa.CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )
    op.create_index("idx_products_created_at", "products", ["created_at"])

    op.create_table(
        "couriers",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_couriers_created_at", "couriers", ["created_at"])

    op.create_table(
        "orders",
        *_entity_columns(),
        sa.Column("user_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("product_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'PAID'")),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="SET NULL"),
    )
    op.create_index("idx_orders_created_at", "orders", ["created_at"])
    op.create_index("idx_orders_user_id", "orders", ["user_id"])
    op.create_index("idx_orders_status", "orders", ["status"])

    op.create_table(
        "deliveries",
        *_entity_columns(),
        sa.Column("order_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("courier_id", sa.Uuid(as_uuid=True), nullable=True),
        sa.Column("pick_up_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("delivered_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["courier_id"], ["couriers.id"], ondelete="SET NULL"),
    )
    op.create_index("idx_deliveries_created_at", "deliveries", ["created_at"])


def downgrade() -> None:
    """
    Drop every commerce table, children before parents.

    WARNING: destructive. In production prefer a forward migration.
    """
    op.drop_index("idx_deliveries_created_at", table_name="deliveries")
    op.drop_table("deliveries")

    op.drop_index("idx_orders_status", table_name="orders")
    op.drop_index("idx_orders_user_id", table_name="orders")
    op.drop_index("idx_orders_created_at", table_name="orders")
    op.drop_table("orders")

    op.drop_index("idx_couriers_created_at", table_name="couriers")
    op.drop_table("couriers")

    op.drop_index("idx_products_created_at", table_name="products")
    op.drop_table("products")

    op.drop_index("idx_users_created_at", table_name="users")
    op.drop_table("users")

"""warehouse baseline schema

Revision ID: 0001_baseline
Revises:
Create Date: 2026-10-19

Localities, sellers, products, warehouses, sections, employees, carries,
product batches, inbound orders and product records.
"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_baseline"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "localities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("locality_name", sa.String(255), nullable=False),
        sa.Column("province_name", sa.String(255), nullable=False),
        sa.Column("country_name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("locality_name", name="uq_localities_locality_name"),
    )

    op.create_table(
        "sellers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cid", sa.Integer(), nullable=False),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("telephone", sa.String(50), nullable=False),
        sa.Column("locality_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cid", name="uq_sellers_cid"),
    )
    op.create_index("ix_sellers_locality_id", "sellers", ["locality_id"])

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("product_code", sa.String(255), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("width", sa.Float(), nullable=False),
        sa.Column("height", sa.Float(), nullable=False),
        sa.Column("length", sa.Float(), nullable=False),
        sa.Column("netweight", sa.Float(), nullable=False),
        sa.Column("expiration_rate", sa.Float(), nullable=False),
        sa.Column("recommended_freezing_temperature", sa.Float(), nullable=False),
        sa.Column("freezing_rate", sa.Float(), nullable=False),
        sa.Column("product_type_id", sa.Integer(), nullable=False),
        sa.Column("seller_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("product_code", name="uq_products_product_code"),
    )

    op.create_table(
        "warehouses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("warehouse_code", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("telephone", sa.String(50), nullable=False),
        sa.Column("minimum_capacity", sa.Integer(), nullable=False),
        sa.Column("minimum_temperature", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("warehouse_code", name="uq_warehouses_warehouse_code"),
    )

    op.create_table(
        "sections",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("section_number", sa.Integer(), nullable=False),
        sa.Column("current_temperature", sa.Integer(), nullable=False),
        sa.Column("minimum_temperature", sa.Integer(), nullable=False),
        sa.Column("current_capacity", sa.Integer(), nullable=False),
        sa.Column("minimum_capacity", sa.Integer(), nullable=False),
        sa.Column("maximum_capacity", sa.Integer(), nullable=False),
        sa.Column("warehouse_id", sa.Integer(), nullable=False),
        sa.Column("product_type_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("section_number", name="uq_sections_section_number"),
    )

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("card_number_id", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("warehouse_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("card_number_id", name="uq_employees_card_number_id"),
    )

    op.create_table(
        "carries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("cid", sa.String(255), nullable=False),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("telephone", sa.String(50), nullable=False),
        sa.Column("locality_id", sa.Integer(), nullable=False),
        sa.Column("batch_number", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("cid", name="uq_carries_cid"),
    )
    op.create_index("ix_carries_locality_id", "carries", ["locality_id"])

    op.create_table(
        "product_batches",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("batch_number", sa.Integer(), nullable=False),
        sa.Column("current_quantity", sa.Integer(), nullable=False),
        sa.Column("current_temperature", sa.Integer(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("initial_quantity", sa.Integer(), nullable=False),
        sa.Column("manufacturing_date", sa.Date(), nullable=False),
        sa.Column("manufacturing_hour", sa.Integer(), nullable=False),
        sa.Column("minimum_temperature", sa.Float(), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.Column("section_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("batch_number", name="uq_product_batches_batch_number"),
    )
    op.create_index(
        "ix_product_batches_section_id", "product_batches", ["section_id"]
    )

    op.create_table(
        "inbound_orders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("order_date", sa.Date(), nullable=False),
        sa.Column("order_number", sa.String(255), nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("product_batch_id", sa.Integer(), nullable=False),
        sa.Column("warehouse_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_inbound_orders_employee_id", "inbound_orders", ["employee_id"]
    )

    op.create_table(
        "product_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("last_update_date", sa.Date(), nullable=False),
        sa.Column("purchase_price", sa.Numeric(19, 2), nullable=False),
        sa.Column("sale_price", sa.Numeric(19, 2), nullable=False),
        sa.Column("product_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_product_records_product_id", "product_records", ["product_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_product_records_product_id", table_name="product_records")
    op.drop_table("product_records")
    op.drop_index("ix_inbound_orders_employee_id", table_name="inbound_orders")
    op.drop_table("inbound_orders")
    op.drop_index("ix_product_batches_section_id", table_name="product_batches")
    op.drop_table("product_batches")
    op.drop_index("ix_carries_locality_id", table_name="carries")
    op.drop_table("carries")
    op.drop_table("employees")
    op.drop_table("sections")
    op.drop_table("warehouses")
    op.drop_table("products")
    op.drop_index("ix_sellers_locality_id", table_name="sellers")
    op.drop_table("sellers")
    op.drop_table("localities")

"""Create categories, products and product_variants tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create categories, products and product_variants tables."""
    # Categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
    )
    op.create_unique_constraint('uq_categories_code', 'categories', ['code'])

    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(100), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('category_id', sa.Integer(),
                  sa.ForeignKey('categories.id'), nullable=False, index=True),
    )
    op.create_unique_constraint('uq_products_code', 'products', ['code'])

    # Product variants table; NULL price means "use the product price"
    op.create_table(
        'product_variants',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id'), nullable=False, index=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('sku', sa.String(100), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
    )
    op.create_unique_constraint('uq_variants_sku', 'product_variants', ['sku'])


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('product_variants')
    op.drop_table('products')
    op.drop_table('categories')

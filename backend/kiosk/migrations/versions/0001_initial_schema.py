"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 00:00:00.000000

Creates the eight kiosk tables:
- customers, products, employees: the managed entities
- payment_methods, receipts, receipt_items: sales records
- time_entries, paychecks: payroll records

Seeds payment_methods with Cash, Credit Card and Debit Card.

Kept identical to bootstrap/scripts/initialize_database.sql so both
backends run on the same physical schema.
"""
import uuid

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'customers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='customers_pkey'),
        sa.UniqueConstraint('email', name='uq_customers_email'),
    )

    op.create_table(
        'products',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column('price', sa.DECIMAL(precision=18, scale=2), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sku', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='products_pkey'),
        sa.UniqueConstraint('sku', name='uq_products_sku'),
    )

    payment_methods = op.create_table(
        'payment_methods',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id', name='payment_methods_pkey'),
    )

    op.create_table(
        'employees',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('hire_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('hourly_rate', sa.DECIMAL(precision=18, scale=2), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint('id', name='employees_pkey'),
        sa.UniqueConstraint('email', name='uq_employees_email'),
    )

    op.create_table(
        'receipts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('customer_id', sa.Uuid(), nullable=False),
        sa.Column('payment_method_id', sa.Uuid(), nullable=False),
        sa.Column('purchase_date', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('total_amount', sa.DECIMAL(precision=18, scale=2), nullable=False),
        sa.Column('tax_amount', sa.DECIMAL(precision=18, scale=2), nullable=True),
        sa.Column('notes', sa.String(length=1000), nullable=True),
        sa.PrimaryKeyConstraint('id', name='receipts_pkey'),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], name='fk_receipts_customers'),
        sa.ForeignKeyConstraint(['payment_method_id'], ['payment_methods.id'], name='fk_receipts_payment_methods'),
    )

    op.create_table(
        'receipt_items',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('receipt_id', sa.Uuid(), nullable=False),
        sa.Column('product_id', sa.Uuid(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.DECIMAL(precision=18, scale=2), nullable=False),
        sa.Column('total_price', sa.DECIMAL(precision=18, scale=2), nullable=False),
        sa.PrimaryKeyConstraint('id', name='receipt_items_pkey'),
        sa.ForeignKeyConstraint(['receipt_id'], ['receipts.id'], name='fk_receipt_items_receipts',
                                ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['products.id'], name='fk_receipt_items_products'),
    )

    op.create_table(
        'time_entries',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('clock_in', sa.DateTime(timezone=True), nullable=False),
        sa.Column('clock_out', sa.DateTime(timezone=True), nullable=True),
        sa.Column('hours_worked', sa.DECIMAL(precision=5, scale=2), nullable=True),
        sa.Column('notes', sa.String(length=500), nullable=True),
        sa.PrimaryKeyConstraint('id', name='time_entries_pkey'),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id'], name='fk_time_entries_employees',
                                ondelete='CASCADE'),
    )

    op.create_table(
        'paychecks',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('employee_id', sa.Uuid(), nullable=False),
        sa.Column('pay_period_start', sa.DateTime(timezone=True), nullable=False),
        sa.Column('pay_period_end', sa.DateTime(timezone=True), nullable=False),
        sa.Column('pay_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('gross_pay', sa.DECIMAL(precision=18, scale=2), nullable=False),
        sa.Column('net_pay', sa.DECIMAL(precision=18, scale=2), nullable=False),
        sa.Column('tax_deduction', sa.DECIMAL(precision=18, scale=2), nullable=True),
        sa.Column('other_deductions', sa.DECIMAL(precision=18, scale=2), nullable=True),
        sa.Column('notes', sa.String(length=1000), nullable=True),
        sa.PrimaryKeyConstraint('id', name='paychecks_pkey'),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id'], name='fk_paychecks_employees',
                                ondelete='CASCADE'),
    )

    op.bulk_insert(payment_methods, [
        {'id': uuid.uuid4(), 'name': 'Cash', 'description': 'Cash payment', 'is_active': True},
        {'id': uuid.uuid4(), 'name': 'Credit Card', 'description': 'Credit card payment', 'is_active': True},
        {'id': uuid.uuid4(), 'name': 'Debit Card', 'description': 'Debit card payment', 'is_active': True},
    ])


def downgrade():
    op.drop_table('paychecks')
    op.drop_table('time_entries')
    op.drop_table('receipt_items')
    op.drop_table('receipts')
    op.drop_table('employees')
    op.drop_table('payment_methods')
    op.drop_table('products')
    op.drop_table('customers')

"""Create vendor, vendor_processing and vendor_sequence tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    document_kind_enum = postgresql.ENUM('CPF', 'CNPJ', name='documentkind', create_type=True)
    document_kind_enum.create(op.get_bind())

    contract_type_enum = postgresql.ENUM(
        'CLT', 'PESSOA_JURIDICA', 'OUTSOURCING',
        name='contracttype',
        create_type=True
    )
    contract_type_enum.create(op.get_bind())

    processing_status_enum = postgresql.ENUM(
        'PENDING', 'RUNNING', 'CONCLUDED', 'ERROR',
        name='processingstatus',
        create_type=True
    )
    processing_status_enum.create(op.get_bind())

    # Registration counter: one row per named sequence
    op.create_table(
        'vendor_sequence',
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('value', sa.BigInteger(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('name'),
        comment='Monotonic counters; advanced only with UPDATE ... RETURNING'
    )
    op.execute("INSERT INTO vendor_sequence (name, value) VALUES ('vendor_registration', 0)")

    op.create_table(
        'vendor',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('registration_code', sa.Text(), nullable=False),
        sa.Column('sequence_number', sa.BigInteger(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('document', sa.Text(), nullable=False),
        sa.Column('document_kind', postgresql.ENUM('CPF', 'CNPJ', name='documentkind', create_type=False), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('contract_type', postgresql.ENUM('CLT', 'PESSOA_JURIDICA', 'OUTSOURCING', name='contracttype', create_type=False), nullable=False),
        sa.Column('branch_id', sa.Text(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('document', name='uq_vendor_document'),
        sa.UniqueConstraint('email', name='uq_vendor_email'),
        sa.UniqueConstraint('registration_code', name='uq_vendor_registration_code'),
        sa.UniqueConstraint('sequence_number', name='uq_vendor_sequence_number'),
        comment='Sales representatives in the roster'
    )
    op.create_index('ix_vendor_branch_id', 'vendor', ['branch_id'])

    op.create_table(
        'vendor_processing',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('status', postgresql.ENUM('PENDING', 'RUNNING', 'CONCLUDED', 'ERROR', name='processingstatus', create_type=False), nullable=False),
        sa.Column('vendor_id', sa.String(36), nullable=True),
        sa.Column('request_json', postgresql.JSONB(astext_type=sa.Text()), nullable=True, comment='Submitted CreateVendorRequest payload'),
        sa.Column('error_message', sa.Text(), nullable=True),
        sa.Column('error_kind', sa.Text(), nullable=True),
        sa.Column('started_at', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column('finished_at', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=sa.text('NOW()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['vendor_id'], ['vendor.id'], name='fk_vendor_processing_vendor_id', ondelete='RESTRICT'),
        comment='Asynchronous vendor creation tracking'
    )
    op.create_index('ix_vendor_processing_status', 'vendor_processing', ['status'])


def downgrade():
    op.drop_index('ix_vendor_processing_status', table_name='vendor_processing')
    op.drop_table('vendor_processing')
    op.drop_index('ix_vendor_branch_id', table_name='vendor')
    op.drop_table('vendor')
    op.drop_table('vendor_sequence')

    op.execute('DROP TYPE IF EXISTS processingstatus')
    op.execute('DROP TYPE IF EXISTS contracttype')
    op.execute('DROP TYPE IF EXISTS documentkind')

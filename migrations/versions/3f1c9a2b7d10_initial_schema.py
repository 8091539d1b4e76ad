"""initial schema: patients, protocols, medications, lab results, sessions

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-16 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a2b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'Patients',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('familyname', sa.String(length=255), nullable=False),
        sa.Column('birthdate', sa.String(length=10), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'Protocols',
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('dialyzer', sa.String(length=100), nullable=True),
        sa.Column('access', sa.String(length=100), nullable=True),
        sa.Column('dialysateFlow', sa.String(length=100), nullable=True),
        sa.Column('bloodFlow', sa.String(length=100), nullable=True),
        sa.Column('duration', sa.String(length=100), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['patient_id'], ['Patients.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('patient_id')
    )
    op.create_table(
        'Medications',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('dosage', sa.String(length=255), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['patient_id'], ['Patients.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_Medications_patient_id'), 'Medications', ['patient_id'], unique=False)
    op.create_table(
        'LabResults',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('result', sa.String(length=255), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['patient_id'], ['Patients.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_LabResults_patient_id'), 'LabResults', ['patient_id'], unique=False)
    op.create_table(
        'Sessions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=True),
        sa.Column('pre_weight', sa.Float(), nullable=False),
        sa.Column('post_weight', sa.Float(), nullable=True),
        sa.Column('pre_bp', sa.String(length=20), nullable=True),
        sa.Column('post_bp', sa.String(length=20), nullable=True),
        sa.Column('access_condition', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['patient_id'], ['Patients.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_Sessions_patient_id'), 'Sessions', ['patient_id'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_Sessions_patient_id'), table_name='Sessions')
    op.drop_table('Sessions')
    op.drop_index(op.f('ix_LabResults_patient_id'), table_name='LabResults')
    op.drop_table('LabResults')
    op.drop_index(op.f('ix_Medications_patient_id'), table_name='Medications')
    op.drop_table('Medications')
    op.drop_table('Protocols')
    op.drop_table('Patients')

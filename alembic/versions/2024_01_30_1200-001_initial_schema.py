"""initial schema

Revision ID: 001
Revises:
Create Date: 2024-01-30 12:00:00

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
    # Create filmes table
    op.create_table(
        'filmes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('titulo', sa.String(length=500), nullable=False),
        sa.Column('genero', sa.String(length=50), nullable=False),
        sa.Column('duracao', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_filmes_titulo'), 'filmes', ['titulo'], unique=False)

    # Create cinemas table
    op.create_table(
        'cinemas',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nome', sa.String(length=200), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_cinemas_nome'), 'cinemas', ['nome'], unique=False)

    # Create enderecos table (one per cinema)
    op.create_table(
        'enderecos',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('logradouro', sa.String(length=300), nullable=False),
        sa.Column('numero', sa.Integer(), nullable=False),
        sa.Column('cinema_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['cinema_id'], ['cinemas.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_enderecos_cinema_id'), 'enderecos', ['cinema_id'], unique=True)

    # Create sessoes table
    op.create_table(
        'sessoes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('filme_id', sa.Integer(), nullable=False),
        sa.Column('cinema_id', sa.Integer(), nullable=False),
        sa.Column('horario_de_encerramento', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['filme_id'], ['filmes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['cinema_id'], ['cinemas.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_sessoes_filme_id'), 'sessoes', ['filme_id'], unique=False)
    op.create_index(op.f('ix_sessoes_cinema_id'), 'sessoes', ['cinema_id'], unique=False)


def downgrade() -> None:
    op.drop_table('sessoes')
    op.drop_table('enderecos')
    op.drop_table('cinemas')
    op.drop_table('filmes')

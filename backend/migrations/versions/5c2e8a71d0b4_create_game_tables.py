"""create game, bank, table, deck and player tables

Revision ID: 5c2e8a71d0b4
Revises:
Create Date: 2026-10-19 10:12:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = '5c2e8a71d0b4'
down_revision = None
branch_labels = None
depends_on = None


COLORS = ('white', 'blue', 'green', 'red', 'black', 'wild')
STATES = ('play', 'picknoble', 'gameover')


def _game_fk():
    return sa.Column('game_id', sa.String(length=64),
                     sa.ForeignKey('game.id', ondelete='CASCADE'), primary_key=True)


def upgrade():
    bind = op.get_bind()
    existing_tables = set(sa.inspect(bind).get_table_names())
    # Databases created with `flask db-reset` already hold the schema
    if 'game' in existing_tables:
        return

    # Enum types are shared by several tables, so create them once up front
    sa.Enum(*COLORS, name='color').create(bind, checkfirst=True)
    sa.Enum(*STATES, name='game_state').create(bind, checkfirst=True)
    color = postgresql.ENUM(*COLORS, name='color', create_type=False)
    state = postgresql.ENUM(*STATES, name='game_state', create_type=False)

    op.create_table(
        'game',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('state', state, nullable=False),
        sa.Column('current', sa.String(length=256), nullable=False),
    )
    op.create_table(
        'game_coin',
        _game_fk(),
        sa.Column('color', color, primary_key=True),
        sa.Column('count', sa.Integer(), nullable=False),
    )
    op.create_table(
        'game_noble',
        _game_fk(),
        sa.Column('position', sa.Integer(), primary_key=True),
        sa.Column('noble_id', sa.String(length=64), nullable=False),
    )
    for table in ('game_card', 'game_deck'):
        op.create_table(
            table,
            _game_fk(),
            sa.Column('tier', sa.Integer(), primary_key=True),
            sa.Column('position', sa.Integer(), primary_key=True),
            sa.Column('card_id', sa.String(length=64), nullable=False),
        )
    op.create_table(
        'player',
        _game_fk(),
        sa.Column('user_id', sa.String(length=256), primary_key=True),
        sa.Column('position', sa.Integer(), nullable=False),
    )
    op.create_index('ix_player_user_id', 'player', ['user_id'])
    op.create_table(
        'player_coin',
        _game_fk(),
        sa.Column('user_id', sa.String(length=256), primary_key=True),
        sa.Column('color', color, primary_key=True),
        sa.Column('count', sa.Integer(), nullable=False),
    )
    op.create_table(
        'player_noble',
        _game_fk(),
        sa.Column('user_id', sa.String(length=256), primary_key=True),
        sa.Column('noble_id', sa.String(length=64), primary_key=True),
    )
    op.create_table(
        'player_card',
        _game_fk(),
        sa.Column('user_id', sa.String(length=256), primary_key=True),
        sa.Column('card_id', sa.String(length=64), primary_key=True),
        sa.Column('reserved', sa.Boolean(), nullable=False),
        sa.Column('sequence', sa.Integer(), nullable=False),
    )


def downgrade():
    for table in ('player_card', 'player_noble', 'player_coin', 'player',
                  'game_deck', 'game_card', 'game_noble', 'game_coin', 'game'):
        op.drop_table(table)
    bind = op.get_bind()
    sa.Enum(name='color').drop(bind, checkfirst=True)
    sa.Enum(name='game_state').drop(bind, checkfirst=True)

"""Initial schema: teams, seasons, lines, games, standings, signs, ballparks.

Revision ID: 001_initial
Revises:
Create Date: 2025-02-10

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # Teams table
    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('sport', sa.String(10), nullable=False, server_default='MLB'),
        sa.Column('abbreviation', sa.String(5), nullable=False, unique=True),
        sa.Column('city', sa.String(50), nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('conference', sa.String(2), nullable=False),
        sa.Column('division', sa.String(20), nullable=False),
        sa.Column('external_id', sa.Integer(), nullable=True),
        sa.Column('primary_color', sa.String(7), nullable=True),
        sa.Column('secondary_color', sa.String(7), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_teams_sport', 'teams', ['sport'])
    op.create_index('ix_teams_external_id', 'teams', ['external_id'])

    # Seasons table
    op.create_table(
        'seasons',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('season', sa.String(4), nullable=False),
        sa.Column('sport', sa.String(10), nullable=False, server_default='MLB'),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('lock_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Upcoming'),
        *_timestamps(),
    )
    op.create_index('idx_seasons_season_sport', 'seasons', ['season', 'sport'], unique=True)

    # Team win-total lines
    op.create_table(
        'team_lines',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('season', sa.String(4), nullable=False),
        sa.Column('sport', sa.String(10), nullable=False, server_default='MLB'),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=False),
        sa.Column('line', sa.Float(), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_team_lines_unique', 'team_lines', ['season', 'sport', 'team_id'], unique=True)

    # Games table
    op.create_table(
        'games',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('game_pk', sa.Integer(), nullable=False, unique=True),
        sa.Column('season', sa.String(4), nullable=False),
        sa.Column('sport', sa.String(10), nullable=False, server_default='MLB'),
        sa.Column('official_date', sa.Date(), nullable=False),
        sa.Column('game_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('game_type', sa.String(30), nullable=False, server_default='RegularSeason'),
        # Series
        sa.Column('series_description', sa.String(100), nullable=True),
        sa.Column('series_game_number', sa.Integer(), nullable=True),
        sa.Column('games_in_series', sa.Integer(), nullable=True),
        # Teams
        sa.Column('home_team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=True),
        sa.Column('away_team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=True),
        sa.Column('home_team_mlb_id', sa.Integer(), nullable=False),
        sa.Column('away_team_mlb_id', sa.Integer(), nullable=False),
        sa.Column('home_team_name', sa.String(100), nullable=True),
        sa.Column('away_team_name', sa.String(100), nullable=True),
        # League records going into the game
        sa.Column('home_wins', sa.Integer(), nullable=True),
        sa.Column('home_losses', sa.Integer(), nullable=True),
        sa.Column('home_win_pct', sa.String(5), nullable=True),
        sa.Column('away_wins', sa.Integer(), nullable=True),
        sa.Column('away_losses', sa.Integer(), nullable=True),
        sa.Column('away_win_pct', sa.String(5), nullable=True),
        # Line score
        sa.Column('home_score', sa.Integer(), nullable=True),
        sa.Column('away_score', sa.Integer(), nullable=True),
        sa.Column('home_hits', sa.Integer(), nullable=True),
        sa.Column('away_hits', sa.Integer(), nullable=True),
        sa.Column('home_errors', sa.Integer(), nullable=True),
        sa.Column('away_errors', sa.Integer(), nullable=True),
        sa.Column('home_is_winner', sa.Boolean(), nullable=True),
        sa.Column('away_is_winner', sa.Boolean(), nullable=True),
        # Status
        sa.Column('abstract_game_state', sa.String(10), nullable=False, server_default='Preview'),
        sa.Column('detailed_state', sa.String(50), nullable=True),
        sa.Column('status_code', sa.String(5), nullable=True),
        # Venue
        sa.Column('venue_mlb_id', sa.Integer(), nullable=True),
        sa.Column('venue_name', sa.String(100), nullable=True),
        sa.Column('day_night', sa.String(5), nullable=True),
        sa.Column('double_header', sa.String(1), nullable=False, server_default='N'),
        sa.Column('game_number', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('scheduled_innings', sa.Integer(), nullable=False, server_default='9'),
        sa.Column('public_facing', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('tiebreaker', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('if_necessary', sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('idx_games_season_date', 'games', ['season', 'official_date'])
    op.create_index('idx_games_home_team_mlb', 'games', ['home_team_mlb_id'])
    op.create_index('idx_games_away_team_mlb', 'games', ['away_team_mlb_id'])

    # Daily standing snapshots
    op.create_table(
        'team_standings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('season', sa.String(4), nullable=False),
        sa.Column('sport', sa.String(10), nullable=False, server_default='MLB'),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=False),
        # Record
        sa.Column('games_played', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('wins', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('losses', sa.Integer(), nullable=False, server_default='0'),
        # Projections
        sa.Column('projected_wins', sa.Float(), nullable=False, server_default='0'),
        sa.Column('pythagorean_wins', sa.Float(), nullable=True),
        sa.Column('pythagorean_win_pct', sa.Float(), nullable=True),
        # Rankings
        sa.Column('division_rank', sa.Integer(), nullable=True),
        sa.Column('league_rank', sa.Integer(), nullable=True),
        sa.Column('sport_rank', sa.Integer(), nullable=True),
        sa.Column('wild_card_rank', sa.Integer(), nullable=True),
        # Games back
        sa.Column('games_back', sa.String(10), nullable=True),
        sa.Column('division_games_back', sa.String(10), nullable=True),
        sa.Column('league_games_back', sa.String(10), nullable=True),
        sa.Column('sport_games_back', sa.String(10), nullable=True),
        sa.Column('wild_card_games_back', sa.String(10), nullable=True),
        # Runs
        sa.Column('runs_scored', sa.Integer(), nullable=True),
        sa.Column('runs_allowed', sa.Integer(), nullable=True),
        sa.Column('run_differential', sa.Integer(), nullable=True),
        # Streak
        sa.Column('streak_code', sa.String(5), nullable=True),
        sa.Column('streak_count', sa.Integer(), nullable=True),
        sa.Column('streak_type', sa.String(10), nullable=True),
        # Playoff status
        sa.Column('clinched', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('clinch_indicator', sa.String(5), nullable=True),
        sa.Column('division_champ', sa.Boolean(), nullable=True),
        sa.Column('division_leader', sa.Boolean(), nullable=True),
        sa.Column('eliminated', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('has_wildcard', sa.Boolean(), nullable=True),
        sa.Column('wild_card_leader', sa.Boolean(), nullable=True),
        # Raw API records
        sa.Column('splits', sa.JSON(), nullable=True),
        sa.Column('expected_record', sa.JSON(), nullable=True),
        sa.Column('league_record', sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index('idx_team_standings_unique', 'team_standings', ['date', 'season', 'team_id'], unique=True)
    op.create_index('idx_team_standings_season_date', 'team_standings', ['season', 'date'])
    op.create_index('idx_team_standings_team_date', 'team_standings', ['team_id', 'date'])

    # Display signs
    op.create_table(
        'signs',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('owner_id', sa.String(100), nullable=True),
        sa.Column('config', sa.JSON(), nullable=False),
        *_timestamps(),
    )

    # Ballparks
    op.create_table(
        'ballparks',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('mlb_venue_id', sa.Integer(), nullable=False, unique=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('sport', sa.String(10), nullable=False, server_default='MLB'),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=False),
        sa.Column('city', sa.String(50), nullable=False),
        sa.Column('state', sa.String(2), nullable=False),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lng', sa.Float(), nullable=False),
        sa.Column('elevation', sa.Integer(), nullable=False),
        sa.Column('field_orientation', sa.Integer(), nullable=False),
        sa.Column('roof_type', sa.String(15), nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table('ballparks')
    op.drop_table('signs')
    op.drop_index('idx_team_standings_team_date', table_name='team_standings')
    op.drop_index('idx_team_standings_season_date', table_name='team_standings')
    op.drop_index('idx_team_standings_unique', table_name='team_standings')
    op.drop_table('team_standings')
    op.drop_index('idx_games_away_team_mlb', table_name='games')
    op.drop_index('idx_games_home_team_mlb', table_name='games')
    op.drop_index('idx_games_season_date', table_name='games')
    op.drop_table('games')
    op.drop_index('idx_team_lines_unique', table_name='team_lines')
    op.drop_table('team_lines')
    op.drop_index('idx_seasons_season_sport', table_name='seasons')
    op.drop_table('seasons')
    op.drop_index('ix_teams_external_id', table_name='teams')
    op.drop_index('ix_teams_sport', table_name='teams')
    op.drop_table('teams')

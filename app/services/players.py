from flask import current_app
from sqlalchemy import or_

from app.errors import NotFoundError, ValidationError
from app.extensions import db
from app.models import DEPTH_MODELS, Player
from app.utils import parse_float_safe, parse_int_safe

PLAYER_FIELDS = (
    'first_name', 'last_name', 'primary_position',
    'fg_position', 'ko_position', 'kor_position', 'punt_position',
    'hands_team', 'height', 'weight', 'forty_time',
)

# form field name -> model attribute for the plain text fields
_TEXT_FIELDS = {
    'primaryPosition': 'primary_position',
    'fgPosition': 'fg_position',
    'koPosition': 'ko_position',
    'korPosition': 'kor_position',
    'puntPosition': 'punt_position',
    'height': 'height',
}


def parse_player_form(form_data):
    """Build player data from a submitted player form.

    Empty optional fields become ``None``. Weight and forty time that do not
    parse as numbers are dropped rather than reported.
    """
    first_name = form_data.get('firstName', '').strip()
    last_name = form_data.get('lastName', '').strip()
    if not first_name or not last_name:
        raise ValidationError('First name and last name are required')

    data = {'first_name': first_name, 'last_name': last_name}
    for field, attr in _TEXT_FIELDS.items():
        data[attr] = form_data.get(field, '').strip() or None
    data['hands_team'] = 'handsTeam' in form_data
    data['weight'] = parse_int_safe(form_data.get('weight'))
    data['forty_time'] = parse_float_safe(form_data.get('fortyTime'))
    return data


def list_players():
    return Player.query.order_by(Player.last_name.asc(), Player.first_name.asc()).all()


def get_player(player_id):
    return db.session.get(Player, player_id)


def search_players(term):
    term = (term or '').strip()
    if not term:
        return list_players()
    # match % and _ literally
    escaped = term.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    pattern = f'%{escaped}%'
    return Player.query.filter(or_(
        Player.first_name.ilike(pattern, escape='\\'),
        Player.last_name.ilike(pattern, escape='\\'),
        Player.primary_position.ilike(pattern, escape='\\'),
    )).order_by(Player.last_name.asc(), Player.first_name.asc()).all()


def _require_names(data):
    if not (data.get('first_name') or '').strip() or not (data.get('last_name') or '').strip():
        raise ValidationError('First name and last name are required')


def create_player(data):
    _require_names(data)
    player = Player(**{k: v for k, v in data.items() if k in PLAYER_FIELDS})
    db.session.add(player)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('Created player %s (id=%s)', player.full_name, player.id)
    return player


def update_player(player_id, data):
    player = get_player(player_id)
    if player is None:
        raise NotFoundError(f'Player {player_id} not found')
    _require_names(data)
    for key, value in data.items():
        if key in PLAYER_FIELDS:
            setattr(player, key, value)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('Updated player %s (id=%s)', player.full_name, player.id)
    return player


def delete_player(player_id):
    """Delete a player along with every depth chart slot they hold."""
    player = get_player(player_id)
    if player is None:
        raise NotFoundError(f'Player {player_id} not found')
    name = player.full_name
    db.session.delete(player)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('Deleted player %s (id=%s)', name, player_id)
    return name


def players_for_unit(unit_type, position=None):
    """Players holding any slot on a unit, or a specific position if given."""
    model = DEPTH_MODELS[unit_type]
    query = Player.query.join(model, model.player_id == Player.id)
    if position:
        query = query.filter(model.position == position)
    return query.distinct().order_by(Player.last_name.asc(), Player.first_name.asc()).all()

from flask import Blueprint, render_template, request, redirect, url_for, flash, g

from app.errors import ValidationError
from app.extensions import db
from app.models import Player
from app.positions import (
    FOOTBALL_POSITIONS, UnitType, depth_label, position_label, unit_type_from_name,
    unit_type_from_slug,
)
from app.services import (
    create_player, delete_player, parse_player_form, player_assignments,
    players_for_unit, search_players, update_player,
)
from app.utils import can_edit, editor_required, login_required

bp = Blueprint('roster', __name__, url_prefix='/roster')


def _render_form(player=None, form=None, error=None, status=200):
    return render_template('roster/form.html', player=player, form=form or {},
                           error=error, football_positions=FOOTBALL_POSITIONS), status


@bp.route('', methods=['GET'])
@login_required
def index():
    search_query = request.args.get('q', '').strip()
    unit_arg = request.args.get('unit', '').strip()
    position = request.args.get('position', '').strip() or None
    # accepts a slug (field-goal) or a display name (Field Goal)
    unit_type = unit_type_from_slug(unit_arg) or unit_type_from_name(unit_arg)

    players = search_players(search_query)
    if unit_type is not None:
        on_unit = {p.id for p in players_for_unit(unit_type, position)}
        players = [p for p in players if p.id in on_unit]
    return render_template('roster/index.html', players=players,
                           search_query=search_query, units=list(UnitType),
                           unit_type=unit_type, can_edit=can_edit(g.user))


@bp.route('/new', methods=['GET'])
@login_required
def new():
    if not can_edit(g.user):
        return redirect(url_for('roster.index'))
    return _render_form()


@bp.route('/new', methods=['POST'])
@editor_required
def new_post():
    try:
        data = parse_player_form(request.form)
    except ValidationError as e:
        return _render_form(form=request.form, error=e.message, status=400)
    player = create_player(data)
    flash(f'{player.full_name} added to the roster.', 'success')
    return redirect(url_for('roster.index'))


@bp.route('/<int:player_id>', methods=['GET'])
@login_required
def detail(player_id):
    player = db.get_or_404(Player, player_id)
    return render_template('roster/detail.html', player=player,
                           assignments=player_assignments(player.id),
                           depth_label=depth_label,
                           position_label=position_label,
                           can_edit=can_edit(g.user),
                           form={}, error=None,
                           football_positions=FOOTBALL_POSITIONS)


@bp.route('/<int:player_id>', methods=['POST'])
@editor_required
def detail_post(player_id):
    player = db.get_or_404(Player, player_id)

    if request.form.get('_action') == 'delete':
        name = delete_player(player.id)
        flash(f'{name} removed from the roster.', 'success')
        return redirect(url_for('roster.index'))

    try:
        data = parse_player_form(request.form)
    except ValidationError as e:
        return _render_form(player=player, form=request.form, error=e.message, status=400)
    update_player(player.id, data)
    flash('Player updated successfully.', 'success')
    return redirect(url_for('roster.detail', player_id=player.id))

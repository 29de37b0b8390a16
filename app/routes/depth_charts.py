from flask import Blueprint, render_template, request, jsonify, abort, g

from app.errors import ValidationError
from app.positions import (
    TEAM_DEPTHS, UnitType, positions_for, unit_type_from_slug,
)
from app.services import AssignmentService, list_players
from app.utils import can_edit, editor_required, login_required, parse_int_safe

bp = Blueprint('depth_charts', __name__, url_prefix='/depth-charts')


def _unit_or_404(slug):
    unit_type = unit_type_from_slug(slug)
    if unit_type is None:
        abort(404)
    return unit_type


def _required_int(form_data, field):
    value = parse_int_safe(form_data.get(field))
    if value is None:
        raise ValidationError('Invalid form data')
    return value


def _required_str(form_data, field):
    value = (form_data.get(field) or '').strip()
    if not value:
        raise ValidationError('Invalid form data')
    return value


@bp.route('', methods=['GET'])
@login_required
def index():
    return render_template('depth_charts/index.html', units=list(UnitType))


@bp.route('/<slug>', methods=['GET'])
@login_required
def view(slug):
    unit_type = _unit_or_404(slug)
    service = AssignmentService(unit_type)
    active_depth = parse_int_safe(request.args.get('depth')) or 1
    if active_depth not in dict(TEAM_DEPTHS):
        active_depth = 1

    team = service.all_tiers()
    by_position = {row['position']: row for row in service.team_with_player_details(active_depth)}
    filled_counts = {depth: len(service.filled_positions(depth)) for depth, _ in TEAM_DEPTHS}
    return render_template('depth_charts/unit.html',
                           unit_type=unit_type,
                           team=team,
                           active_depth=active_depth,
                           by_position=by_position,
                           filled_counts=filled_counts,
                           positions=positions_for(unit_type),
                           team_depths=TEAM_DEPTHS,
                           players=list_players(),
                           can_edit=can_edit(g.user))


@bp.route('/<slug>', methods=['POST'])
@editor_required
def update(slug):
    unit_type = _unit_or_404(slug)
    service = AssignmentService(unit_type)
    action = request.form.get('_action')

    if action == 'assignPlayer':
        player_id = _required_int(request.form, 'playerId')
        position = _required_str(request.form, 'position')
        team_depth = _required_int(request.form, 'teamDepth')
        slot = service.assign(player_id, position, team_depth)
        return jsonify({'success': True, 'assignment': slot.to_dict()})

    if action == 'removePlayer':
        position = _required_str(request.form, 'position')
        team_depth = _required_int(request.form, 'teamDepth')
        removed = service.unassign(position, team_depth)
        return jsonify({'success': True, 'removed': removed})

    raise ValidationError('Invalid action')

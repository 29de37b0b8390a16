from flask import Blueprint, render_template

from app.models import DEPTH_MODELS, Player
from app.positions import UnitType
from app.utils import login_required

bp = Blueprint('main', __name__)


@bp.route('/', methods=['GET'])
@login_required
def index():
    total_players = Player.query.count()
    hands_team_players = Player.query.filter_by(hands_team=True).count()
    filled_slots = {unit_type: model.query.count() for unit_type, model in DEPTH_MODELS.items()}
    return render_template('index.html', total_players=total_players,
                           hands_team_players=hands_team_players,
                           filled_slots=filled_slots, units=list(UnitType))

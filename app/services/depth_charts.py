from flask import current_app
from sqlalchemy.exc import IntegrityError

from app.errors import NotFoundError, ValidationError
from app.extensions import db
from app.models import DEPTH_MODELS, Player
from app.positions import VALID_DEPTHS, is_valid_position, sort_positions

UNKNOWN_PLAYER = 'Unknown player'


class AssignmentService:
    """Depth chart operations for a single special teams unit.

    Every unit stores its slots in its own table, but the tables are
    identical so one service covers all five.
    """

    def __init__(self, unit_type):
        self.unit_type = unit_type
        self.model = DEPTH_MODELS[unit_type]

    def _rows_for_depth(self, team_depth):
        return db.session.query(self.model, Player)\
            .outerjoin(Player, self.model.player_id == Player.id)\
            .filter(self.model.team_depth == team_depth)\
            .all()

    def list_team(self, team_depth=1):
        """Slots filled at ``team_depth`` with the occupant's name, in catalog order."""
        results = []
        for slot, player in self._rows_for_depth(team_depth):
            results.append({
                'id': slot.id,
                'position': slot.position,
                'team_depth': slot.team_depth,
                'player_id': slot.player_id,
                'player_name': player.full_name if player else UNKNOWN_PLAYER,
                'primary_position': player.primary_position if player else None,
            })
        return sort_positions(results, self.unit_type)

    def team_with_player_details(self, team_depth=1):
        results = []
        for slot, player in self._rows_for_depth(team_depth):
            results.append({
                'id': slot.id,
                'position': slot.position,
                'team_depth': slot.team_depth,
                'player_id': slot.player_id,
                'player_name': player.full_name if player else UNKNOWN_PLAYER,
                'primary_position': player.primary_position if player else None,
                'height': player.height if player else None,
                'weight': player.weight if player else None,
                'forty_time': player.forty_time if player else None,
            })
        return sort_positions(results, self.unit_type)

    def all_tiers(self):
        return {depth: self.list_team(depth) for depth in VALID_DEPTHS}

    def filled_positions(self, team_depth=1):
        rows = db.session.query(self.model.position).filter_by(team_depth=team_depth).all()
        return [r[0] for r in rows]

    def get_occupant(self, position, team_depth=1):
        return self.model.query.filter_by(position=position, team_depth=team_depth).first()

    def assign(self, player_id, position, team_depth):
        """Put ``player_id`` in the slot, replacing whoever holds it now."""
        self._validate_slot(position, team_depth)
        if db.session.get(Player, player_id) is None:
            raise ValidationError(f'Player {player_id} does not exist.')

        slot = self.get_occupant(position, team_depth)
        if slot is None:
            slot = self.model(position=position, team_depth=team_depth, player_id=player_id)
            db.session.add(slot)
        else:
            slot.player_id = player_id

        try:
            db.session.commit()
        except IntegrityError:
            # another request filled the slot after our lookup; last write wins
            db.session.rollback()
            slot = self.model.query.filter_by(position=position, team_depth=team_depth).first()
            if slot is None:
                raise
            slot.player_id = player_id
            try:
                db.session.commit()
            except Exception:
                db.session.rollback()
                raise
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info('%s: player %s assigned to %s (depth %s)',
                                self.unit_type.label, player_id, position, team_depth)
        return slot

    def unassign(self, position, team_depth):
        slot = self.get_occupant(position, team_depth)
        if slot is None:
            raise NotFoundError(f'No player assigned to {position} on depth {team_depth}.')
        removed = slot.to_dict()
        db.session.delete(slot)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        current_app.logger.info('%s: %s (depth %s) cleared', self.unit_type.label, position, team_depth)
        return removed

    def assignments_for_player(self, player_id):
        return self.model.query.filter_by(player_id=player_id)\
            .order_by(self.model.team_depth.asc(), self.model.position.asc())\
            .all()

    def _validate_slot(self, position, team_depth):
        if team_depth not in VALID_DEPTHS:
            raise ValidationError(f'Team depth must be one of {", ".join(map(str, VALID_DEPTHS))}.')
        if not is_valid_position(self.unit_type, position):
            raise ValidationError(f"'{position}' is not a {self.unit_type.label} position.")


def player_assignments(player_id):
    """Every slot a player holds, grouped by unit."""
    return {
        unit_type: AssignmentService(unit_type).assignments_for_player(player_id)
        for unit_type in DEPTH_MODELS
    }

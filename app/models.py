from sqlalchemy.orm import declared_attr
from werkzeug.security import check_password_hash, generate_password_hash

from app.extensions import db
from app.positions import UnitType

ROLE_ADMIN = 'ADMIN'
ROLE_VIEWER = 'VIEWER'
ROLES = (ROLE_ADMIN, ROLE_VIEWER)


class User(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    username = db.Column(db.String(100), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(10), nullable=False, default=ROLE_VIEWER)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<User {self.username} ({self.role})>'


class Player(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    primary_position = db.Column(db.String(10))

    # Preferred slot on each unit, free text from the player form
    fg_position = db.Column(db.String(10))
    ko_position = db.Column(db.String(10))
    kor_position = db.Column(db.String(10))
    punt_position = db.Column(db.String(10))
    hands_team = db.Column(db.Boolean, nullable=False, default=False)

    height = db.Column(db.String(20))
    weight = db.Column(db.Integer)
    forty_time = db.Column(db.Float)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    # Deleting a player removes every depth chart slot they hold
    kickoff_positions = db.relationship('KickoffDepth', back_populates='player', cascade='all, delete-orphan')
    kickoff_return_positions = db.relationship('KickoffReturnDepth', back_populates='player', cascade='all, delete-orphan')
    punt_positions = db.relationship('PuntDepth', back_populates='player', cascade='all, delete-orphan')
    field_goal_positions = db.relationship('FieldGoalDepth', back_populates='player', cascade='all, delete-orphan')
    hands_positions = db.relationship('HandsDepth', back_populates='player', cascade='all, delete-orphan')

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    def __repr__(self):
        return f'<Player {self.full_name}>'


class DepthAssignmentMixin:
    """Columns shared by every unit's depth chart table.

    A slot is identified by (position, team_depth) and holds exactly one
    player. Subclasses set ``unit_type`` and ``player_attr`` (the name of the
    matching relationship on Player).
    """
    unit_type = None
    player_attr = None

    id = db.Column(db.Integer, primary_key=True)
    position = db.Column(db.String(10), nullable=False)
    team_depth = db.Column(db.Integer, nullable=False, default=1)  # 1st, 2nd or 3rd team
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    @declared_attr
    def player_id(cls):
        return db.Column(db.Integer, db.ForeignKey('player.id', ondelete='CASCADE'), nullable=False, index=True)

    @declared_attr
    def player(cls):
        return db.relationship('Player', back_populates=cls.player_attr)

    @declared_attr
    def __table_args__(cls):
        return (db.UniqueConstraint('position', 'team_depth', name=f'uq_{cls.__tablename__}_position_depth'),)

    def to_dict(self):
        return {
            'id': self.id,
            'unit': self.unit_type.name,
            'position': self.position,
            'team_depth': self.team_depth,
            'player_id': self.player_id,
        }

    def __repr__(self):
        return f'<{type(self).__name__} {self.position} depth={self.team_depth} player={self.player_id}>'


class KickoffDepth(DepthAssignmentMixin, db.Model):
    __tablename__ = 'kickoff_depth'
    unit_type = UnitType.KICKOFF
    player_attr = 'kickoff_positions'


class KickoffReturnDepth(DepthAssignmentMixin, db.Model):
    __tablename__ = 'kickoff_return_depth'
    unit_type = UnitType.KICKOFF_RETURN
    player_attr = 'kickoff_return_positions'


class PuntDepth(DepthAssignmentMixin, db.Model):
    __tablename__ = 'punt_depth'
    unit_type = UnitType.PUNT
    player_attr = 'punt_positions'


class FieldGoalDepth(DepthAssignmentMixin, db.Model):
    __tablename__ = 'field_goal_depth'
    unit_type = UnitType.FIELD_GOAL
    player_attr = 'field_goal_positions'


class HandsDepth(DepthAssignmentMixin, db.Model):
    __tablename__ = 'hands_depth'
    unit_type = UnitType.HANDS
    player_attr = 'hands_positions'


DEPTH_MODELS = {
    UnitType.KICKOFF: KickoffDepth,
    UnitType.KICKOFF_RETURN: KickoffReturnDepth,
    UnitType.PUNT: PuntDepth,
    UnitType.FIELD_GOAL: FieldGoalDepth,
    UnitType.HANDS: HandsDepth,
}

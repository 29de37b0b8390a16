"""Static position catalog for the special teams units.

Each unit has a fixed, ordered list of position codes. The order is the
order the slots are drawn on the field (left to right, front to back) and
is used to sort depth chart rows for display.
"""
import enum
from collections import namedtuple

Position = namedtuple('Position', ['code', 'label'])


class UnitType(enum.Enum):
    KICKOFF = 'Kickoff'
    KICKOFF_RETURN = 'Kickoff Return'
    PUNT = 'Punt'
    FIELD_GOAL = 'Field Goal'
    HANDS = 'Hands'

    @property
    def label(self):
        return self.value

    @property
    def slug(self):
        return self.name.lower().replace('_', '-')


POSITIONS = {
    UnitType.KICKOFF: [
        Position('L1', 'L1 (Safety)'),
        Position('L2', 'L2 (Contain)'),
        Position('L3', 'L3 (Line)'),
        Position('L4', 'L4 (Line)'),
        Position('L5', 'L5 (Gunner)'),
        Position('K', 'K (Kicker)'),
        Position('R5', 'R5 (Gunner)'),
        Position('R4', 'R4 (Line)'),
        Position('R3', 'R3 (Line)'),
        Position('R2', 'R2 (Contain)'),
        Position('R1', 'R1 (Safety)'),
    ],
    UnitType.KICKOFF_RETURN: [
        Position('LT', 'LT (Left Tackle)'),
        Position('LG', 'LG (Left Guard)'),
        Position('LC', 'LC (Left Center)'),
        Position('RC', 'RC (Right Center)'),
        Position('RG', 'RG (Right Guard)'),
        Position('RT', 'RT (Right Tackle)'),
        Position('LW', 'LW (Left Wing)'),
        Position('FB', 'FB (Fullback)'),
        Position('RW', 'RW (Right Wing)'),
        Position('LR', 'LR (Left Returner)'),
        Position('RR', 'RR (Right Returner)'),
    ],
    UnitType.PUNT: [
        Position('GL', 'GL (Gunner Left)'),
        Position('LW', 'LW (Left Wing)'),
        Position('LT', 'LT (Left Tackle)'),
        Position('LG', 'LG (Left Guard)'),
        Position('LS', 'LS (Long Snapper)'),
        Position('RG', 'RG (Right Guard)'),
        Position('RT', 'RT (Right Tackle)'),
        Position('RW', 'RW (Right Wing)'),
        Position('GR', 'GR (Gunner Right)'),
        Position('PP', 'PP (Punt Protector)'),
        Position('P', 'P (Punter)'),
    ],
    # Field Goal / PAT
    UnitType.FIELD_GOAL: [
        Position('LW', 'LW (Left Wing)'),
        Position('LTE', 'LTE (Left Tight End)'),
        Position('LT', 'LT (Left Tackle)'),
        Position('LG', 'LG (Left Guard)'),
        Position('LS', 'LS (Long Snapper)'),
        Position('RG', 'RG (Right Guard)'),
        Position('RT', 'RT (Right Tackle)'),
        Position('RTE', 'RTE (Right Tight End)'),
        Position('RW', 'RW (Right Wing)'),
        Position('H', 'H (Holder)'),
        Position('K', 'K (Kicker)'),
    ],
    # Onside kick recovery
    UnitType.HANDS: [
        Position('FL', 'FL (Front Left)'),
        Position('FC', 'FC (Front Center)'),
        Position('FR', 'FR (Front Right)'),
        Position('ML', 'ML (Middle Left)'),
        Position('MC', 'MC (Middle Center)'),
        Position('MR', 'MR (Middle Right)'),
        Position('BL', 'BL (Back Left)'),
        Position('BC', 'BC (Back Center)'),
        Position('BR', 'BR (Back Right)'),
        Position('SL', 'SL (Safety Left)'),
        Position('SR', 'SR (Safety Right)'),
    ],
}

TEAM_DEPTHS = [
    (1, '1st Team'),
    (2, '2nd Team'),
    (3, '3rd Team'),
]
VALID_DEPTHS = tuple(value for value, _ in TEAM_DEPTHS)

# Choices for the primary position dropdown on the player form
FOOTBALL_POSITIONS = [
    'QB', 'RB', 'FB', 'WR', 'TE',
    'LT', 'LG', 'C', 'RG', 'RT',
    'DE', 'DT', 'NT', 'OLB', 'ILB', 'MLB',
    'CB', 'FS', 'SS', 'DB',
    'K', 'P', 'LS', 'KR', 'PR',
]


def positions_for(unit_type):
    return list(POSITIONS[unit_type])


def position_codes(unit_type):
    return [p.code for p in POSITIONS[unit_type]]


def is_valid_position(unit_type, code):
    return code in position_codes(unit_type)


def position_label(unit_type, code):
    for p in POSITIONS[unit_type]:
        if p.code == code:
            return p.label
    return code


def rank_of(unit_type, code):
    """Index of ``code`` in the unit's catalog.

    Codes that are not in the catalog rank after every known code so that
    stray rows show up at the bottom of a depth chart instead of the top.
    """
    codes = position_codes(unit_type)
    try:
        return codes.index(code)
    except ValueError:
        return len(codes)


def sort_positions(items, unit_type):
    """Return ``items`` (dicts or objects with a ``position``) in catalog order."""
    def key(item):
        code = item['position'] if isinstance(item, dict) else item.position
        return rank_of(unit_type, code)
    return sorted(items, key=key)


def unit_type_from_name(name):
    for unit_type in UnitType:
        if unit_type.value == name:
            return unit_type
    return None


def unit_type_from_slug(slug):
    for unit_type in UnitType:
        if unit_type.slug == slug:
            return unit_type
    return None


def depth_label(team_depth):
    return dict(TEAM_DEPTHS).get(team_depth, f'Team {team_depth}')

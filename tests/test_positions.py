from app.positions import (
    POSITIONS, UnitType, depth_label, is_valid_position, position_codes,
    position_label, rank_of, sort_positions, unit_type_from_name,
    unit_type_from_slug,
)


def test_every_unit_has_eleven_positions():
    for unit_type in UnitType:
        assert len(POSITIONS[unit_type]) == 11
        assert len(set(position_codes(unit_type))) == 11


def test_kickoff_order():
    assert position_codes(UnitType.KICKOFF) == [
        'L1', 'L2', 'L3', 'L4', 'L5', 'K', 'R5', 'R4', 'R3', 'R2', 'R1',
    ]
    assert rank_of(UnitType.KICKOFF, 'K') == 5


def test_codes_are_scoped_to_unit():
    assert is_valid_position(UnitType.PUNT, 'LS')
    assert is_valid_position(UnitType.FIELD_GOAL, 'LS')
    assert not is_valid_position(UnitType.KICKOFF, 'LS')
    assert position_label(UnitType.FIELD_GOAL, 'H') == 'H (Holder)'


def test_unknown_code_ranks_last():
    assert rank_of(UnitType.HANDS, 'ZZ') == len(POSITIONS[UnitType.HANDS])
    rows = [{'position': 'ZZ'}, {'position': 'SR'}, {'position': 'FL'}]
    assert [r['position'] for r in sort_positions(rows, UnitType.HANDS)] == ['FL', 'SR', 'ZZ']


def test_sort_positions_ignores_insertion_order():
    rows = [{'position': code} for code in ('P', 'GL', 'LS', 'PP')]
    assert [r['position'] for r in sort_positions(rows, UnitType.PUNT)] == ['GL', 'LS', 'PP', 'P']


def test_unit_lookup_by_name_and_slug():
    assert unit_type_from_name('Kickoff Return') is UnitType.KICKOFF_RETURN
    assert unit_type_from_name('Onside') is None
    assert UnitType.FIELD_GOAL.slug == 'field-goal'
    assert unit_type_from_slug('field-goal') is UnitType.FIELD_GOAL
    assert unit_type_from_slug('field_goal') is None


def test_depth_labels():
    assert depth_label(1) == '1st Team'
    assert depth_label(3) == '3rd Team'

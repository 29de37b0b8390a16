import pytest
from werkzeug.datastructures import ImmutableMultiDict

from app.errors import NotFoundError, ValidationError
from app.positions import UnitType
from app.services import (
    AssignmentService, create_player, delete_player, get_player, list_players,
    parse_player_form, players_for_unit, search_players, update_player,
)


def _form(**fields):
    return ImmutableMultiDict(fields)


def test_parse_form_full():
    data = parse_player_form(_form(
        firstName=' Joe ', lastName='Smith', primaryPosition='WR',
        koPosition='L5', korPosition='', puntPosition='GL', fgPosition='',
        handsTeam='on', height='6\'0"', weight='190', fortyTime='4.45',
    ))
    assert data['first_name'] == 'Joe'
    assert data['primary_position'] == 'WR'
    assert data['ko_position'] == 'L5'
    assert data['kor_position'] is None
    assert data['hands_team'] is True
    assert data['weight'] == 190
    assert data['forty_time'] == 4.45


def test_parse_form_drops_bad_numbers():
    data = parse_player_form(_form(firstName='Joe', lastName='Smith', weight='heavy', fortyTime=''))
    assert data['weight'] is None
    assert data['forty_time'] is None
    assert data['hands_team'] is False


def test_parse_form_requires_names():
    with pytest.raises(ValidationError):
        parse_player_form(_form(firstName='Joe', lastName='  '))


def test_create_player_without_numbers(app):
    player = create_player(parse_player_form(_form(firstName='Joe', lastName='Smith')))
    stored = get_player(player.id)
    assert stored.full_name == 'Joe Smith'
    assert stored.weight is None
    assert stored.forty_time is None
    assert stored.hands_team is False


def test_create_player_requires_names(app):
    with pytest.raises(ValidationError):
        create_player({'first_name': 'Joe', 'last_name': ''})


def test_list_sorted_by_last_then_first(app, make_player):
    make_player('Zed', 'Adams')
    make_player('Amy', 'Brown')
    make_player('Abe', 'Adams')
    assert [p.full_name for p in list_players()] == ['Abe Adams', 'Zed Adams', 'Amy Brown']


def test_search_is_case_insensitive(app, make_player):
    make_player('Joe', 'Smith', primary_position='WR')
    make_player('Sam', 'Jones', primary_position='LS')
    make_player('Tim', 'Black', primary_position='CB')

    assert [p.last_name for p in search_players('SMI')] == ['Smith']
    assert [p.last_name for p in search_players('ls')] == ['Jones']
    assert [p.last_name for p in search_players('m')] == ['Black', 'Jones', 'Smith']
    assert len(search_players('')) == 3


def test_update_player(app, make_player):
    player = make_player()
    update_player(player.id, {'first_name': 'Joey', 'last_name': 'Smith', 'weight': 200})
    assert get_player(player.id).first_name == 'Joey'
    assert get_player(player.id).weight == 200


def test_update_and_delete_missing_player(app):
    with pytest.raises(NotFoundError):
        update_player(42, {'first_name': 'A', 'last_name': 'B'})
    with pytest.raises(NotFoundError):
        delete_player(42)


def test_players_for_unit(app, make_player):
    gunner = make_player('Gus', 'Gunner')
    snapper = make_player('Sid', 'Snapper')
    make_player('Ned', 'Nobody')
    punt = AssignmentService(UnitType.PUNT)
    punt.assign(gunner.id, 'GL', 1)
    punt.assign(gunner.id, 'GR', 2)
    punt.assign(snapper.id, 'LS', 1)

    assert [p.last_name for p in players_for_unit(UnitType.PUNT)] == ['Gunner', 'Snapper']
    assert [p.last_name for p in players_for_unit(UnitType.PUNT, 'LS')] == ['Snapper']
    assert players_for_unit(UnitType.HANDS) == []


def test_search_matches_wildcard_characters_literally(app, make_player):
    make_player('Joe', 'Smith')
    make_player('Al', 'Jones')
    make_player('Ty', "O'Neil_Jr")

    assert [p.last_name for p in search_players('_')] == ["O'Neil_Jr"]
    assert search_players('%') == []
    assert search_players('S%h') == []
    assert [p.last_name for p in search_players('neil_')] == ["O'Neil_Jr"]

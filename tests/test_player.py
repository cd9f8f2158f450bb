from apishooter.player import Player


def test_player_creation():
    player = Player()
    assert player.hp == 100
    assert player.max_hp == 100
    assert player.get_ammo == 99
    assert player.post_ammo == 20
    assert player.put_ammo == 20
    assert player.delete_ammo == 3
    assert player.x == 400.0
    assert player.y == 500.0


def test_player_initial_position():
    player = Player()
    assert player.x == 400.0
    assert player.y == 500.0
    assert player.size == 30.0
    assert player.speed == 300.0


def test_players_are_independent():
    first = Player()
    second = Player()
    first.hp -= 30
    assert second.hp == 100
    assert first.hp == 70
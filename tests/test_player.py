from player import PlayerState


def test_inventory_starts_empty() -> None:
    player = PlayerState()
    assert player.inventory == []
    assert player.inventory_lines() == ["Empty"]


def test_add_item_keeps_pickup_order() -> None:
    player = PlayerState()
    player.add_item("Magic Stone")
    player.add_item("Ancient Key")
    assert player.inventory == ["Magic Stone", "Ancient Key"]
    assert player.has_item("Ancient Key")
    assert not player.has_item("Torch")
    assert player.inventory_lines() == ["- Magic Stone", "- Ancient Key"]

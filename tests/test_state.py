from dungeonterm.state import Message, State, WorldEntity


def _world():
    player = WorldEntity(entity_id=1, x=3, y=4, room_id=10, species="human", hp=5, maxhp=5)
    floor = WorldEntity(entity_id=2, x=3, y=4, room_id=10, species="floor")
    coin = WorldEntity(entity_id=3, x=0, y=0, room_id=1, species="gold", weight=1)
    return State(entities=[player, floor, coin], self_entity_id=1), player, floor, coin


def test_self_entity_found():
    state, player, _, _ = _world()
    assert state.self_entity() == player


def test_self_entity_missing_when_id_unknown():
    state, _, _, _ = _world()
    state.self_entity_id = 99
    assert state.self_entity() is None


def test_self_entity_none_without_id():
    state, _, _, _ = _world()
    state.self_entity_id = None
    assert state.self_entity() is None


def test_inventory_holds_carried_items():
    state, _, _, coin = _world()
    assert state.inventory() == [coin]


def test_visible_entities_exclude_inventory():
    state, player, floor, coin = _world()
    visible = state.visible_entities()
    assert visible == [player, floor]
    assert coin not in visible


def test_inventory_and_visible_partition_entities():
    state, _, _, _ = _world()
    combined = state.inventory() + state.visible_entities()
    assert sorted(e.entity_id for e in combined) == sorted(
        e.entity_id for e in state.entities
    )


def test_without_self_everything_is_visible():
    state, _, _, _ = _world()
    state.self_entity_id = None
    assert state.inventory() == []
    assert state.visible_entities() == state.entities


def test_default_state_is_empty():
    state = State()
    assert state.entities == []
    assert state.chat == []
    assert state.self_entity_id is None


def test_message_fields():
    msg = Message(sender="bob", receiver="human", message="hi")
    assert (msg.sender, msg.receiver, msg.message) == ("bob", "human", "hi")
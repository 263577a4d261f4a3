from generation import build_prompt, make_player_blueprint, merge_blueprint
from generation.blueprint import NEGATIVE_PROMPT, POSITIONS


def test_same_seed_same_blueprint():
    assert make_player_blueprint(208341) == make_player_blueprint(208341)


def test_seeded_blueprint_is_well_formed():
    blueprint = make_player_blueprint(7)

    assert blueprint.id == "player-7"
    assert blueprint.position in POSITIONS
    assert 17 <= blueprint.age <= 38
    assert len(blueprint.club_colors) == 2
    assert len(blueprint.personality) == 3
    assert len(blueprint.appearance.accessories) <= 2


def test_empty_override_returns_base():
    base = make_player_blueprint(1)

    assert merge_blueprint(base, {}) == base
    assert merge_blueprint(base, None) == base


def test_scalar_and_list_fields_replaced():
    base = make_player_blueprint(1)

    merged = merge_blueprint(base, {
        "position": "Striker",
        "age": 21,
        "clubColors": ["#111111", "#222222", "#333333"],
        "personality": ["calm"],
    })

    assert merged.position == "Striker"
    assert merged.age == 21
    assert merged.club_colors == ["#111111", "#222222", "#333333"]
    assert merged.personality == ["calm"]
    assert merged.nationality == base.nationality


def test_nested_fields_merged_individually():
    base = make_player_blueprint(2)

    merged = merge_blueprint(base, {"appearance": {"hairstyle": "afro"}, "attire": {"pattern": "hoops"}})

    assert merged.appearance.hairstyle == "afro"
    assert merged.appearance.facial_hair == base.appearance.facial_hair
    assert merged.attire.pattern == "hoops"
    assert merged.attire.kit_style == base.attire.kit_style


def test_non_empty_accessories_replace_base_exactly():
    base = make_player_blueprint(3)

    merged = merge_blueprint(base, {"appearance": {"accessories": ["gloves", "snood"]}})

    assert merged.appearance.accessories == ["gloves", "snood"]


def test_absent_or_empty_accessories_keep_base():
    base = make_player_blueprint(4)

    absent = merge_blueprint(base, {"appearance": {"hairstyle": "mohawk"}})
    empty = merge_blueprint(base, {"appearance": {"accessories": []}})

    assert absent.appearance.accessories == base.appearance.accessories
    assert empty.appearance.accessories == base.appearance.accessories


def test_merge_does_not_mutate_base():
    base = make_player_blueprint(5)
    snapshot = base.to_dict()

    merge_blueprint(base, {"clubColors": ["#000000"], "appearance": {"accessories": ["headband"]}})

    assert base.to_dict() == snapshot


def test_prompt_follows_fixed_order():
    blueprint = merge_blueprint(make_player_blueprint(9), {
        "nationality": "Brazilian",
        "position": "Winger",
        "age": 24,
        "dominantFoot": "Left",
        "clubColors": ["#FFD400", "#0B3D91"],
        "appearance": {"hairstyle": "braids", "facialHair": "stubble", "accessories": ["headband"]},
        "attire": {"pattern": "hoops"},
        "personality": ["flamboyant", "fearless"],
        "playingStyle": "Inverted winger",
    })

    prompt = build_prompt(blueprint)

    assert prompt.startswith("ultra detailed portrait of a fictional Brazilian Winger, age 24, left footed player")
    assert "wearing hoops kit in #FFD400 and #0B3D91" in prompt
    assert "accessories: headband" in prompt
    assert prompt.index("personality: flamboyant, fearless") < prompt.index("playing style: Inverted winger")
    assert prompt.endswith("sports photography, bokeh")
    assert NEGATIVE_PROMPT not in prompt


def test_prompt_without_accessories_says_none():
    blueprint = make_player_blueprint(1)
    blueprint.appearance.accessories = []

    assert "accessories: none" in build_prompt(blueprint)


def test_string_list_override_is_one_item_list():
    base = make_player_blueprint(1)

    merged = merge_blueprint(base, {
        "clubColors": "#FF0000",
        "personality": "calm",
        "appearance": {"accessories": "headband"},
    })

    assert merged.club_colors == ["#FF0000"]
    assert merged.personality == ["calm"]
    assert merged.appearance.accessories == ["headband"]


def test_wrongly_typed_overrides_are_ignored():
    base = make_player_blueprint(6)

    merged = merge_blueprint(base, {
        "age": "veteran",
        "appearance": "bald",
        "attire": ["hoops"],
        "clubColors": 7,
        "position": 9,
    })

    assert merged == base

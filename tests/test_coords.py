from spellcount.engine.coords import Coordinate, SkillCoordinates
from spellcount.models.settings import MagicCountSettings


def R(**kw):
    return SkillCoordinates(MagicCountSettings(**kw))


def test_skill_types_are_consecutive_from_base():
    r = R()
    assert r.type_of_stype(1) == 0
    assert r.type_of_stype(3) == 2
    assert r.type_of_stype(0) is None
    assert r.type_of_stype(4) is None
    assert r.is_managed_stype(2) and not r.is_managed_stype(5)


def test_family_boundaries_leave_one_gap_slot():
    r = R()
    assert r.family_of(9) is None
    assert r.family_of(10) == 0 and r.family_of(30) == 0
    assert r.family_of(31) is None
    assert r.family_of(32) == 1 and r.family_of(52) == 1
    assert r.family_of(53) is None
    assert r.family_of(54) == 2 and r.family_of(74) == 2
    assert r.family_of(75) is None


def test_levels_follow_spells_per_level():
    r = R()
    assert [r.level_of(i) for i in (10, 11, 12, 13)] == [1, 1, 1, 2]
    assert r.level_of(30) == 7
    assert r.level_of(32) == 1
    assert r.level_of(52) == 7
    assert r.coordinate_of(35) == Coordinate(1, 2)


def test_every_family_id_resolves_and_gaps_do_not():
    for kw in ({}, {"spells_per_level": 1, "max_level": 3}, {"spells_per_level": 8, "max_level": 9, "start_id": 100}):
        r = R(**kw)
        s = r.settings
        for t in range(s.spell_type_count):
            for skill_id in r.family_ids(t):
                coord = r.coordinate_of(skill_id)
                assert coord is not None and coord.type == t
                assert 1 <= coord.level <= s.max_level
            gap = s.family_start(t) + s.family_size
            assert r.family_of(gap) is None
            assert r.level_of(gap) is None
        assert r.coordinate_of(s.start_id - 1) is None


def test_declared_skill_type_drives_the_type():
    r = R()
    assert r.type_of_skill(13, 1) == 0
    assert r.level_of(13, 1) == 2
    assert r.type_of_skill(13, 7) is None
    assert r.level_of(13, 7) is None
    # id far past the family for its declared type
    assert r.level_of(40, 1) is None
    assert r.coordinate_of(40, 1) is None


def test_skill_ids_at_coordinate():
    r = R()
    assert list(r.skill_ids_at(0, 1)) == [10, 11, 12]
    assert list(r.skill_ids_at(1, 2)) == [35, 36, 37]
    assert list(r.skill_ids_at(2, 7)) == [72, 73, 74]


def test_coordinate_cell_is_zero_based():
    assert Coordinate(2, 3).cell == (2, 2)

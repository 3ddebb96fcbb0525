import pytest

from spellcount.engine.commands import (
    ALL,
    UnknownActorError,
    parse_recover_target,
    recover_magic,
    run_plugin_command,
)
from spellcount.engine.coords import Coordinate


def _drain(system, actor, skill_id, times=2):
    for _ in range(times):
        system.pay(actor, skill_id)


def test_parse_target():
    assert parse_recover_target("All") == ALL
    assert parse_recover_target("ALL") == ALL
    assert parse_recover_target(" 3 ") == 3
    with pytest.raises(ValueError):
        parse_recover_target("everyone")


def test_recover_all_restores_only_party_members(system, roster):
    roster.party = [2, 3, 5]
    merla, tobin, wren, sable = (roster.actor(i) for i in (2, 3, 5, 4))
    _drain(system, merla, 10)
    _drain(system, tobin, 32)
    _drain(system, wren, 35)
    _drain(system, sable, 13)
    sable_before = sable.ledger.snapshot()

    assert recover_magic(system, roster, ALL) == [2, 3, 5]

    for actor in (merla, tobin, wren):
        assert actor.ledger.current == actor.ledger.maximum
    assert sable.ledger.snapshot() == sable_before
    assert sable.ledger.get(Coordinate(0, 2)) == sable.ledger.get_max(Coordinate(0, 2)) - 2


def test_recover_single_actor(system, roster):
    merla, tobin = roster.actor(2), roster.actor(3)
    _drain(system, merla, 10)
    _drain(system, tobin, 32)
    assert recover_magic(system, roster, 2) == [2]
    assert merla.ledger.current == merla.ledger.maximum
    assert tobin.ledger.current != tobin.ledger.maximum


def test_unknown_actor(system, roster):
    with pytest.raises(UnknownActorError):
        recover_magic(system, roster, 99)


def test_unknown_party_member_recovers_nobody(system, roster):
    roster.party = [2, 99, 3]
    merla, tobin = roster.actor(2), roster.actor(3)
    _drain(system, merla, 10)
    _drain(system, tobin, 32)
    before = (merla.ledger.snapshot(), tobin.ledger.snapshot())

    with pytest.raises(UnknownActorError):
        recover_magic(system, roster, ALL)

    assert (merla.ledger.snapshot(), tobin.ledger.snapshot()) == before
    assert merla.ledger.current != merla.ledger.maximum


def test_plugin_command_text(system, roster):
    merla = roster.actor(2)
    _drain(system, merla, 10)
    assert run_plugin_command("GR_MagicRecover 2", system, roster) == [2]
    assert merla.ledger.current == merla.ledger.maximum
    assert run_plugin_command("magicrecover all", system, roster) == [1, 2, 3]
    assert run_plugin_command("ShowPicture 1", system, roster) is None
    with pytest.raises(ValueError):
        run_plugin_command("MagicRecover", system, roster)

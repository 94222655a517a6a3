import pytest

from src.pokertracker.ledger import SessionLedger, SessionNotFound


def make_ledger():
    led = SessionLedger()
    a = led.add("Friday Game", 100.0, 150.0, "1/2")
    b = led.add("Saturday Game", 200.0, 180.0, "2/5")
    return led, a, b


def test_two_sessions_totals():
    led, _, _ = make_ledger()
    assert led.total_buy_in() == 300.0
    assert led.total_cash_out() == 330.0
    assert led.total_gain_loss() == 30.0
    assert led.total_count() == 2


def test_add_computes_gain_loss_and_unique_ids():
    led, a, b = make_ledger()
    assert a != b
    recs = led.list()
    assert [r.gain_loss for r in recs] == [50.0, -20.0]
    for r in recs:
        assert r.gain_loss == r.cash_out - r.buy_in


def test_empty_ledger_totals_are_zero():
    led = SessionLedger()
    assert led.total_gain_loss() == 0
    assert led.total_count() == 0
    assert led.total_buy_in() == 0
    assert led.total_cash_out() == 0
    assert led.list() == []


def test_clear_empties_ledger():
    led, _, _ = make_ledger()
    led.clear()
    assert led.list() == []
    t = led.totals()
    assert (t.gain_loss, t.count, t.buy_in, t.cash_out) == (0, 0, 0, 0)


def test_update_monetary_field_recomputes_gain_loss():
    led, a, _ = make_ledger()
    led.update(a, buy_in=120.0)
    rec = led.get(a)
    assert rec.buy_in == 120.0
    assert rec.gain_loss == 30.0
    led.update(a, {"cashOut": 100.0})
    assert led.get(a).gain_loss == -20.0


def test_update_text_fields_only():
    led, a, _ = make_ledger()
    led.update(a, {"gameName": "Home Game", "stakes": "5/10"})
    rec = led.get(a)
    assert rec.game_name == "Home Game"
    assert rec.stakes == "5/10"
    assert rec.gain_loss == 50.0


def test_update_none_values_are_ignored():
    led, a, _ = make_ledger()
    led.update(a, game_name=None, buy_in=None, cash_out=90.0, stakes=None)
    rec = led.get(a)
    assert rec.game_name == "Friday Game"
    assert rec.buy_in == 100.0
    assert rec.gain_loss == -10.0


def test_update_missing_id_raises_and_leaves_ledger_unchanged():
    led, _, _ = make_ledger()
    before = led.list()
    with pytest.raises(SessionNotFound) as exc:
        led.update("nope", buy_in=1.0)
    assert exc.value.session_id == "nope"
    assert "nope" in str(exc.value)
    assert led.list() == before


def test_update_rejects_unknown_or_derived_fields():
    led, a, _ = make_ledger()
    with pytest.raises(ValueError):
        led.update(a, gain_loss=999.0)
    with pytest.raises(ValueError):
        led.update(a, {"id": "x", "buyIn": 1.0})
    assert led.get(a).buy_in == 100.0


def test_delete_middle_preserves_order_and_missing_is_noop():
    led = SessionLedger()
    ids = [led.add(f"g{i}", 10.0, 10.0 + i, "1/2") for i in range(4)]
    assert led.delete(ids[1]) is True
    assert [r.game_name for r in led.list()] == ["g0", "g2", "g3"]
    assert led.delete("missing") is False
    assert led.total_count() == 3


def test_count_tracks_adds_and_deletes():
    led = SessionLedger()
    ids = [led.add("g", 1.0, 2.0, "1/2") for _ in range(5)]
    for sid in ids[:2]:
        led.delete(sid)
    assert led.total_count() == 3
    assert len(led) == 3


def test_total_gain_loss_is_cash_out_minus_buy_in():
    led = SessionLedger()
    for buy_in, cash_out in [(100.0, 40.0), (50.0, 75.5), (0.0, 12.25), (300.0, 300.0)]:
        led.add("g", buy_in, cash_out, "1/2")
    assert led.total_gain_loss() == pytest.approx(led.total_cash_out() - led.total_buy_in())


def test_list_is_an_independent_snapshot():
    led, a, _ = make_ledger()
    snap = led.list()
    snap[0].buy_in = 0.0
    snap.clear()
    assert led.total_count() == 2
    assert led.get(a).buy_in == 100.0


def test_restore_keeps_ids_and_recomputes_gain_loss():
    src, a, b = make_ledger()
    recs = src.list()
    recs[0].gain_loss = 12345.0
    led = SessionLedger.restore(recs)
    assert [r.id for r in led.list()] == [a, b]
    assert led.get(a).gain_loss == 50.0


def test_restore_rejects_duplicate_ids():
    src, _, _ = make_ledger()
    recs = src.list()
    with pytest.raises(ValueError):
        SessionLedger.restore([recs[0], recs[0]])


def test_rejected_update_leaves_record_unchanged():
    led, a, _ = make_ledger()
    before = led.get(a)
    with pytest.raises(ValueError):
        led.update(a, game_name="renamed", buy_in="abc")
    with pytest.raises(ValueError):
        led.update(a, {"cashOut": object()})
    assert led.get(a) == before
    for r in led.list():
        assert r.gain_loss == r.cash_out - r.buy_in


def test_update_coerces_numeric_strings():
    led, a, _ = make_ledger()
    led.update(a, buy_in="120", cash_out=200)
    rec = led.get(a)
    assert rec.buy_in == 120.0 and isinstance(rec.buy_in, float)
    assert rec.gain_loss == 80.0

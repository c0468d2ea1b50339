import asyncio

import pytest

from app.client.alerts import AlertStore


@pytest.mark.asyncio
async def test_alert_expires_after_timeout():
    store = AlertStore()

    alert_id = store.set_alert("Profile Created", "success", timeout=0.01)
    assert [alert.id for alert in store.alerts] == [alert_id]

    await asyncio.sleep(0.05)
    assert store.alerts == []


@pytest.mark.asyncio
async def test_alerts_expire_independently():
    store = AlertStore()

    store.set_alert("short", "danger", timeout=0.01)
    long_id = store.set_alert("long", "danger", timeout=10)

    await asyncio.sleep(0.05)
    assert [alert.id for alert in store.alerts] == [long_id]
    store.close()


@pytest.mark.asyncio
async def test_remove_alert_is_idempotent_and_cancels_timer():
    store = AlertStore(default_timeout=10)
    alert_id = store.set_alert("bye", "success")

    store.remove_alert(alert_id)
    store.remove_alert(alert_id)
    store.remove_alert("unknown")

    assert store.alerts == []
    assert store._timers == {}


@pytest.mark.asyncio
async def test_close_cancels_pending_timers():
    store = AlertStore(default_timeout=10)
    store.set_alert("one", "success")
    store.set_alert("two", "danger")

    store.close()

    assert store.alerts == []
    assert store._timers == {}


def test_set_alert_needs_a_running_loop():
    with pytest.raises(RuntimeError):
        AlertStore().set_alert("no loop", "danger")

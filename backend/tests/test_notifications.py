import pytest

from admin_console.services.notifications import ManualScheduler, NotificationQueue


def test_notification_expires_after_lifetime(queue, scheduler):
    note = queue.success("Saved")
    assert note.state == "visible"
    assert note.lifetime_ms == 3000

    scheduler.advance(2999)
    assert queue.visible() == [note]

    scheduler.advance(1)
    assert queue.visible() == []
    assert note.state == "dismissed"


def test_manual_dismissal_cancels_timer(queue, scheduler):
    note = queue.push("Saved", "success", lifetime_ms=3000)
    scheduler.advance(100)
    assert queue.dismiss(note.id)
    assert scheduler.pending == 0

    later = queue.info("Another one", lifetime_ms=0)
    scheduler.advance_to(3000)
    assert queue.visible() == [later]
    assert note.state == "dismissed"
    assert not queue.dismiss(note.id)


def test_zero_lifetime_persists_until_dismissed(queue, scheduler):
    note = queue.warning("Heads up", lifetime_ms=0)
    scheduler.advance(60_000)
    assert queue.visible() == [note]
    assert queue.dismiss(note.id)
    assert len(queue) == 0


def test_notifications_keep_insertion_order(queue):
    first = queue.success("one")
    second = queue.error("two")
    third = queue.info("three")
    assert [n.message for n in queue.visible()] == ["one", "two", "three"]

    queue.dismiss(second.id)
    assert queue.visible() == [first, third]


def test_expiry_only_removes_its_own_notification(queue, scheduler):
    short = queue.info("short", lifetime_ms=1000)
    long = queue.info("long", lifetime_ms=5000)
    scheduler.advance(1000)
    assert queue.visible() == [long]
    assert short.state == "dismissed"


def test_clear_cancels_every_timer(queue, scheduler):
    queue.success("a")
    queue.error("b")
    queue.info("c", lifetime_ms=0)
    queue.clear()
    assert queue.visible() == []
    assert scheduler.pending == 0


def test_default_lifetime_is_configurable(scheduler):
    queue = NotificationQueue(scheduler, default_lifetime_ms=500)
    note = queue.success("quick")
    scheduler.advance(500)
    assert note.state == "dismissed"


def test_negative_lifetime_rejected(queue):
    with pytest.raises(ValueError):
        queue.push("bad", lifetime_ms=-1)


def test_manual_scheduler_runs_due_calls_in_order():
    scheduler = ManualScheduler()
    fired = []
    scheduler.call_later(200, lambda: fired.append("b"))
    scheduler.call_later(100, lambda: fired.append("a"))
    scheduler.advance(150)
    assert fired == ["a"]
    assert scheduler.now_ms == 150
    scheduler.advance(100)
    assert fired == ["a", "b"]

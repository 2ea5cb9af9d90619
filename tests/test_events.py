from core.events import Event, EventQueue


def test_drain_yields_in_push_order():
    queue = EventQueue()
    pushed = [Event.SPAWN_PIPE, Event.SPAWN_COIN, Event.UPDATE_SCORE, Event.DESPAWN_COIN]
    for event in pushed:
        queue.push(event)

    assert list(queue.drain()) == pushed


def test_drain_leaves_queue_empty():
    queue = EventQueue()
    queue.extend([Event.DESPAWN_PIPE, Event.UPDATE_SCORE])

    list(queue.drain())

    assert len(queue) == 0
    assert not queue
    assert list(queue.drain()) == []


def test_drain_is_lazy_and_pops_one_at_a_time():
    queue = EventQueue()
    queue.extend([Event.SPAWN_PIPE, Event.SPAWN_COIN, Event.UPDATE_SCORE])

    drained = queue.drain()
    assert len(queue) == 3

    assert next(drained) is Event.SPAWN_PIPE
    assert len(queue) == 2

    assert list(drained) == [Event.SPAWN_COIN, Event.UPDATE_SCORE]
    assert len(queue) == 0


def test_same_event_can_be_queued_twice():
    queue = EventQueue()
    queue.push(Event.DESPAWN_COIN)
    queue.push(Event.DESPAWN_COIN)

    assert list(queue.drain()) == [Event.DESPAWN_COIN, Event.DESPAWN_COIN]

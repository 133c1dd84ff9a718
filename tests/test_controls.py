from asteroids.controls import Intent, IntentQueue


def test_queue_drains_in_arrival_order():
    queue = IntentQueue()
    queue.push(Intent.THRUST_START)
    queue.push(Intent.FIRE)
    queue.push(Intent.FIRE_RELEASE)
    assert len(queue) == 3
    assert list(queue.drain()) == [Intent.THRUST_START, Intent.FIRE, Intent.FIRE_RELEASE]
    assert len(queue) == 0
    assert list(queue.drain()) == []


def test_clear():
    queue = IntentQueue()
    queue.push(Intent.ROTATE_LEFT)
    queue.clear()
    assert list(queue.drain()) == []

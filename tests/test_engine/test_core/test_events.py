from enum import Enum, auto
from dungeon_engine.core.events import EventBus, Event

class MockEvent(Enum):
    TEST_EVENT = auto()
    OTHER_EVENT = auto()

def test_event_bus_subscribe_publish(event_bus):
    received = []
    def handler(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, handler)
    event = event_bus.publish(MockEvent.TEST_EVENT, enemy="Slime")

    assert received == [event]
    assert isinstance(event, Event)
    assert event.type == MockEvent.TEST_EVENT
    assert event["enemy"] == "Slime"
    assert event.get("missing", 3) == 3

def test_event_bus_unsubscribe(event_bus):
    received = []
    def handler(event):
        received.append(event)

    event_bus.subscribe(MockEvent.TEST_EVENT, handler)
    event_bus.unsubscribe(MockEvent.TEST_EVENT, handler)
    event_bus.unsubscribe(MockEvent.OTHER_EVENT, handler)
    event_bus.publish(MockEvent.TEST_EVENT)

    assert received == []

def test_handlers_run_in_subscription_order(event_bus):
    order = []

    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("first"))
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: order.append("second"))
    event_bus.subscribe(MockEvent.OTHER_EVENT, lambda e: order.append("other"))

    event_bus.publish(MockEvent.TEST_EVENT)

    assert order == ["first", "second"]

def test_failing_handler_does_not_stop_dispatch(event_bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError("boom")

    event_bus.subscribe(MockEvent.TEST_EVENT, broken)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: received.append("ok"))

    event_bus.publish(MockEvent.TEST_EVENT)

    assert received == ["ok"]
    assert "Error in event handler" in caplog.text

def test_handler_may_unsubscribe_itself(event_bus):
    received = []

    def once(event):
        received.append(event.type)
        event_bus.unsubscribe(MockEvent.TEST_EVENT, once)

    event_bus.subscribe(MockEvent.TEST_EVENT, once)
    event_bus.subscribe(MockEvent.TEST_EVENT, lambda e: received.append("after"))

    event_bus.publish(MockEvent.TEST_EVENT)
    event_bus.publish(MockEvent.TEST_EVENT)

    assert received == [MockEvent.TEST_EVENT, "after", "after"]

def test_publish_without_handlers(event_bus):
    event = event_bus.publish(MockEvent.OTHER_EVENT, value=1)
    assert event["value"] == 1

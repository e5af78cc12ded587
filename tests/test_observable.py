"""
Notification graph tests.
"""

import gc

import pytest

from ficcgraph.patterns import Flag, NotificationError, Observable, ObservableValue, Observer


class Counter(Observer):
    def __init__(self):
        super().__init__()
        self.count = 0

    def update(self):
        self.count += 1


class Failing(Observer):
    def update(self):
        raise RuntimeError("boom")


class Relay(Observer, Observable):
    """Observer forwarding every notification."""

    def __init__(self):
        Observer.__init__(self)
        Observable.__init__(self)

    def update(self):
        self.notify_observers()


def test_registered_observer_is_notified():
    subject = Observable()
    flag = Flag()
    flag.register_with(subject)

    subject.notify_observers()

    assert flag.is_up()


def test_registration_is_idempotent():
    subject = Observable()
    counter = Counter()
    counter.register_with(subject)
    counter.register_with(subject)

    subject.notify_observers()

    assert counter.count == 1
    assert subject.observer_count() == 1


def test_unregistered_observer_is_not_notified():
    subject = Observable()
    flag = Flag()
    flag.register_with(subject)
    flag.unregister_with(subject)

    subject.notify_observers()

    assert not flag.is_up()
    assert flag.observables() == []


def test_unregister_with_all():
    first, second = Observable(), Observable()
    counter = Counter()
    counter.register_with(first)
    counter.register_with(second)

    counter.unregister_with_all()
    first.notify_observers()
    second.notify_observers()

    assert counter.count == 0


def test_register_with_none_is_ignored():
    flag = Flag()
    flag.register_with(None)
    assert flag.observables() == []


def test_notification_is_transitive():
    source = Observable()
    relay = Relay()
    relay.register_with(source)
    flag = Flag()
    flag.register_with(relay)

    source.notify_observers()

    assert flag.is_up()


def test_subject_does_not_keep_observers_alive():
    subject = Observable()
    flag = Flag()
    flag.register_with(subject)
    assert subject.observer_count() == 1

    del flag
    gc.collect()

    assert subject.observer_count() == 0


def test_failing_observer_does_not_stop_notification():
    subject = Observable()
    failing = Failing()
    failing.register_with(subject)
    flag = Flag()
    flag.register_with(subject)

    with pytest.raises(NotificationError, match="boom"):
        subject.notify_observers()

    assert flag.is_up()


def test_flag_lower():
    flag = Flag(up=True)
    assert flag.is_up()
    flag.lower()
    assert not flag.is_up()


def test_observable_value_notifies_on_every_set():
    value = ObservableValue(1)
    counter = Counter()
    counter.register_with(value)

    value.set(2)
    value.set(2)

    assert value.value == 2
    assert counter.count == 2

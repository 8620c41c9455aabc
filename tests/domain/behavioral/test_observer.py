import logging

from patterncatalog.domain.behavioral.observer import (
    EmailReceiver,
    Subject,
    TVStation,
    WeatherReport,
)


class RecordingObserver:
    def __init__(self):
        self.received = []

    def notify(self, payload):
        self.received.append(payload)


class AlwaysEqualObserver(RecordingObserver):
    """Equal to every other instance, to prove membership is by identity."""

    def __eq__(self, other):
        return isinstance(other, AlwaysEqualObserver)

    def __hash__(self):
        return 1


def test_publish_reaches_every_observer_once():
    # Arrange
    subject = Subject()
    o1, o2 = RecordingObserver(), RecordingObserver()
    subject.register(o1)
    subject.register(o2)

    # Act
    delivered = subject.publish("msg")

    # Assert
    assert delivered == 2
    assert o1.received == ["msg"]
    assert o2.received == ["msg"]


def test_unregistered_observer_stops_receiving():
    subject = Subject()
    o1, o2 = RecordingObserver(), RecordingObserver()
    subject.register(o1)
    subject.register(o2)
    subject.publish("first")

    subject.unregister(o1)
    subject.publish("second")

    assert o1.received == ["first"]
    assert o2.received == ["first", "second"]


def test_registering_twice_is_a_no_op():
    subject = Subject()
    observer = RecordingObserver()

    subject.register(observer)
    subject.register(observer)
    subject.publish("msg")

    assert len(subject) == 1
    assert observer.received == ["msg"]


def test_membership_is_by_identity_not_equality():
    subject = Subject()
    a, b = AlwaysEqualObserver(), AlwaysEqualObserver()

    subject.register(a)
    subject.register(b)
    subject.unregister(a)

    assert a not in subject
    assert b in subject


def test_unregistering_unknown_observer_is_harmless():
    subject = Subject()

    subject.unregister(RecordingObserver())

    assert len(subject) == 0


def test_failing_observer_does_not_stop_delivery(caplog):
    # Arrange
    class FailingObserver:
        def notify(self, payload):
            raise RuntimeError("boom")

    subject = Subject()
    failing, healthy = FailingObserver(), RecordingObserver()
    subject.register(failing)
    subject.register(healthy)

    # Act
    with caplog.at_level(logging.ERROR):
        delivered = subject.publish("msg")

    # Assert
    assert delivered == 1
    assert healthy.received == ["msg"]
    assert len(subject) == 2
    assert "boom" in caplog.text


def test_registry_changes_during_publish_apply_to_next_publish():
    # Arrange
    subject = Subject()
    late = RecordingObserver()

    class Recruiter(RecordingObserver):
        def notify(self, payload):
            super().notify(payload)
            subject.register(late)
            subject.unregister(self)

    recruiter = Recruiter()
    subject.register(recruiter)

    # Act
    subject.publish("first")
    subject.publish("second")

    # Assert
    assert recruiter.received == ["first"]
    assert late.received == ["second"]


def test_weather_report_to_stations(transcript):
    weather_report = WeatherReport()
    weather_report.register(EmailReceiver(transcript))
    weather_report.register(TVStation(transcript))

    weather_report.new_report("Cloudy, Temperature: 23 degrees")

    assert sorted(transcript.lines) == [
        "Email receiver got report: Cloudy, Temperature: 23 degrees",
        "TV station got report: Cloudy, Temperature: 23 degrees",
    ]

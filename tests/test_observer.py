import pytest

from algopractice.observer import (
    ConsolePersonObserver,
    Observable,
    Observer,
    Person,
    SaferObservable,
    TrafficAdministration,
)


class Recorder(Observer):
    def __init__(self):
        self.events = []

    def field_changed(self, source, field_name):
        self.events.append((source, field_name))


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()


@pytest.mark.parametrize("cls", [Observable, SaferObservable])
def test_notify_reaches_subscribers(cls):
    observable = cls()
    first, second = Recorder(), Recorder()
    observable.subscribe(first)
    observable.subscribe(second)
    observable.notify("src", "field")
    assert first.events == [("src", "field")]
    assert second.events == [("src", "field")]


@pytest.mark.parametrize("cls", [Observable, SaferObservable])
def test_unsubscribe_stops_notifications(cls):
    observable = cls()
    recorder = Recorder()
    observable.subscribe(recorder)
    observable.unsubscribe(recorder)
    observable.notify("src", "field")
    assert recorder.events == []


def test_observable_unsubscribe_removes_all_copies():
    observable = Observable()
    recorder = Recorder()
    observable.subscribe(recorder)
    observable.subscribe(recorder)
    observable.unsubscribe(recorder)
    assert observable.observers == []


def test_person_age_change_notifies_age_and_can_vote():
    person = Person()
    recorder = Recorder()
    person.subscribe(recorder)
    person.age = 15
    person.age = 16
    assert [name for _, name in recorder.events] == ["age", "age", "can_vote"]
    assert all(source is person for source, _ in recorder.events)


def test_same_age_does_not_notify():
    person = Person(20)
    recorder = Recorder()
    person.subscribe(recorder)
    person.age = 20
    assert recorder.events == []


def test_can_vote_threshold():
    assert Person(15).can_vote is False
    assert Person(16).can_vote is True


def test_console_observer_output(capsys):
    person = Person()
    person.subscribe(ConsolePersonObserver())
    person.age = 16
    assert capsys.readouterr().out.splitlines() == [
        "Person's age has changed to 16.",
        "Person's can_vote has changed to true.",
    ]


def test_traffic_administration_unsubscribes_itself(capsys):
    person = Person()
    admin = TrafficAdministration()
    person.subscribe(admin)
    person.age = 15
    person.age = 16
    person.age = 17
    person.age = 18
    assert capsys.readouterr().out.splitlines() == [
        "Whoa there, you're not old enough to drive!",
        "Whoa there, you're not old enough to drive!",
        "Oh, ok, we no longer care!",
    ]
    assert admin not in person.observers
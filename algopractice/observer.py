"""Observers notified when a field of an observed object changes."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any


class Observer(ABC):
    """Something told about field changes of an observed object."""

    @abstractmethod
    def field_changed(self, source: Any, field_name: str) -> None:
        """React to ``field_name`` of ``source`` having changed."""


class Observable:
    """Keeps a list of observers and notifies each of them in turn."""

    def __init__(self) -> None:
        self.observers: list[Observer] = []

    def notify(self, source: Any, field_name: str) -> None:
        """Tell every subscribed observer that ``field_name`` changed."""
        for observer in list(self.observers):
            observer.field_changed(source, field_name)

    def subscribe(self, observer: Observer) -> None:
        """Add ``observer`` to the list."""
        self.observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Remove every subscription of ``observer``."""
        self.observers = [o for o in self.observers if o is not observer]


class SaferObservable:
    """Observable guarded by a reentrant lock.

    Unsubscribing leaves an empty slot instead of shrinking the list, so an
    observer may safely unsubscribe itself while being notified.
    """

    def __init__(self) -> None:
        self.observers: list[Observer | None] = []
        self._lock = threading.RLock()

    def notify(self, source: Any, field_name: str) -> None:
        """Tell every subscribed observer that ``field_name`` changed."""
        with self._lock:
            for observer in self.observers:
                if observer is not None:
                    observer.field_changed(source, field_name)

    def subscribe(self, observer: Observer) -> None:
        """Add ``observer`` to the list."""
        with self._lock:
            self.observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Blank out the first subscription of ``observer``, if any."""
        for index, current in enumerate(self.observers):
            if current is observer:
                self.observers[index] = None
                return


class Person(SaferObservable):
    """A person whose age changes are reported to observers."""

    VOTING_AGE = 16

    def __init__(self, age: int = 0) -> None:
        super().__init__()
        self._age = age

    @property
    def age(self) -> int:
        """The person's age in years."""
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        if self._age == value:
            return
        old_can_vote = self.can_vote
        self._age = value
        self.notify(self, "age")
        if old_can_vote != self.can_vote:
            self.notify(self, "can_vote")

    @property
    def can_vote(self) -> bool:
        """True from the voting age onwards."""
        return self._age >= self.VOTING_AGE


class ConsolePersonObserver(Observer):
    """Prints each change of a person's fields."""

    def field_changed(self, source: Person, field_name: str) -> None:
        text = f"Person's {field_name} has changed to "
        if field_name == "age":
            text += str(source.age)
        if field_name == "can_vote":
            text += "true" if source.can_vote else "false"
        print(text + ".")


class TrafficAdministration(Observer):
    """Warns under-age drivers and stops watching once they are old enough."""

    DRIVING_AGE = 17

    def field_changed(self, source: Person, field_name: str) -> None:
        if field_name != "age":
            return
        if source.age < self.DRIVING_AGE:
            print("Whoa there, you're not old enough to drive!")
        else:
            print("Oh, ok, we no longer care!")
            source.unsubscribe(self)
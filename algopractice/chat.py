"""A chat room that relays messages between the people who have joined it."""

from __future__ import annotations


class Person:
    """A chat participant who keeps a log of every message received."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.room: ChatRoom | None = None
        self.chat_log: list[str] = []

    def _joined_room(self) -> ChatRoom:
        if self.room is None:
            raise RuntimeError(f"{self.name} has not joined a chat room")
        return self.room

    def say(self, message: str) -> None:
        """Send ``message`` to everyone else in the room."""
        self._joined_room().broadcast(self.name, message)

    def pm(self, who: str, message: str) -> None:
        """Send ``message`` privately to the person called ``who``."""
        self._joined_room().message(self.name, who, message)

    def receive(self, origin: str, message: str) -> None:
        """Record and show a message that arrived from ``origin``."""
        entry = f'{origin}: "{message}"'
        print(f"[{self.name}'s chat session]{entry}")
        self.chat_log.append(entry)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Person({self.name!r})"


class ChatRoom:
    """Mediator passing messages between its members."""

    def __init__(self) -> None:
        self.people: list[Person] = []

    def broadcast(self, origin: str, message: str) -> None:
        """Deliver ``message`` to every member not named ``origin``."""
        for person in self.people:
            if person.name != origin:
                person.receive(origin, message)

    def join(self, person: Person) -> None:
        """Announce ``person`` to the room and add them to it."""
        self.broadcast("room", f"{person.name} joins the chat")
        person.room = self
        self.people.append(person)

    def message(self, origin: str, who: str, message: str) -> None:
        """Deliver ``message`` to the first member named ``who``, if any."""
        target = next((p for p in self.people if p.name == who), None)
        if target is not None:
            target.receive(origin, message)
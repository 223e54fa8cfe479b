from typing import Dict, Iterator, List, Tuple

from schemas import Message


class Conversation:
    """Append-only chat transcript. Insertion order is display order."""

    def __init__(self):
        self._messages: List[Message] = []

    def append(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    def add(self, role: str, content: str, kind: str = "text") -> Message:
        return self.append(Message(role=role, content=content, kind=kind))

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def to_dicts(self) -> List[Dict[str, str]]:
        return [m.model_dump() for m in self._messages]

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Person:
    first_name: Optional[str] = None


@dataclass
class Attachment:
    file_name: Optional[str] = None


@dataclass
class Message:
    person: Optional[Person] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    attachments: Optional[list[Attachment]] = None


@dataclass
class Entity1:
    nullable_int1: Optional[int] = None
    int2: int = 0
    list1: Optional[list[str]] = field(default_factory=list)


@dataclass
class Holder:
    value: Any = None

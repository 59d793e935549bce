"""
Test Fixtures

Common test classes used across test modules
"""

import datetime
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Protocol


class Database:
    """Test database class"""

    def __init__(self):
        self.name = "TestDB"


class CacheService:
    """Test cache service"""

    def __init__(self):
        self.cache = {}


class UserRepository:
    """Test repository with dependencies"""

    def __init__(self, db: Database, cache: CacheService):
        self.db = db
        self.cache = cache


class Level1:
    """First level of nested dependencies"""
    pass


class Level2:
    """Second level of nested dependencies"""

    def __init__(self, l1: Level1):
        self.l1 = l1


class Level3:
    """Third level of nested dependencies"""

    def __init__(self, l2: Level2):
        self.l2 = l2


class CircularA:
    """Depends on CircularB"""

    def __init__(self, b: 'CircularB'):
        self.b = b


class CircularB:
    """Depends on CircularA"""

    def __init__(self, a: CircularA):
        self.a = a


class CircularX:
    """Three-step cycle X -> Y -> Z -> X"""

    def __init__(self, y: 'CircularY'):
        self.y = y


class CircularY:
    def __init__(self, z: 'CircularZ'):
        self.z = z


class CircularZ:
    def __init__(self, x: CircularX):
        self.x = x


class SelfReferencing:
    """Depends on itself"""

    def __init__(self, other: 'SelfReferencing'):
        self.other = other


class Mailer:
    """Service with scalar parameters"""

    def __init__(self, host: str, port: int = 25):
        self.host = host
        self.port = port


class IDatabase(ABC):
    """Abstract database interface"""

    @abstractmethod
    def connect(self) -> str:
        pass


class PostgresDatabase(IDatabase):
    """PostgreSQL implementation of IDatabase"""

    def connect(self) -> str:
        return "Connected to PostgreSQL"


class MySQLDatabase(IDatabase):
    """MySQL implementation of IDatabase"""

    def connect(self) -> str:
        return "Connected to MySQL"


class PartialDatabase(IDatabase):
    """Still abstract - connect() is not implemented"""

    @abstractmethod
    def close(self) -> None:
        pass


class Greeter(Protocol):
    """Protocol interface"""

    def greet(self) -> str:
        ...


class EnglishGreeter:
    def greet(self) -> str:
        return "hello"


class UserService:
    """Service depending on an interface"""

    def __init__(self, db: IDatabase):
        self.db = db


class GreetingService:
    def __init__(self, greeter: Greeter):
        self.greeter = greeter


class ReportBuilder:
    """Mixes a scalar and a class typed parameter"""

    def __init__(self, title: str, db: Database):
        self.title = title
        self.db = db


class Scheduler:
    """Callable typed parameter next to a plain one"""

    def __init__(self, callback: Callable[[], int], value: int = 0):
        self.callback = callback
        self.value = value


class OptionalCacheClient:
    """Optional class typed parameter with a default"""

    def __init__(self, cache: Optional[CacheService] = None):
        self.cache = cache


class FallbackService:
    """Interface typed parameter with a default"""

    def __init__(self, db: Optional[IDatabase] = None):
        self.db = db


class UntypedService:
    """Parameter without any type hint"""

    def __init__(self, dependency):
        self.dependency = dependency


class TimestampedEvent:
    """Class typed parameter whose type has no inspectable signature"""

    def __init__(self, when: datetime.datetime = None):
        self.when = when


class Envelope:
    """Any typed parameters"""

    def __init__(self, sender: Any, payload: Any = None):
        self.sender = sender
        self.payload = payload


class ReplicaConsumer:
    """Two parameters of the same class"""

    def __init__(self, primary: Database, replica: Database):
        self.primary = primary
        self.replica = replica


class Pipeline:
    """Records post-construction calls"""

    def __init__(self):
        self.calls = []

    def add_stage(self, name: str, weight: int = 1):
        self.calls.append((name, weight))

    def attach_cache(self, cache: CacheService):
        self.calls.append(("cache", cache))


class BrokenStartup:
    """Scheduled call fails"""

    instances = 0

    def __init__(self):
        BrokenStartup.instances += 1

    def start(self):
        raise RuntimeError("startup failed")


class FailingConstructor:
    def __init__(self):
        raise ValueError("constructor failed")


class DependsOnFailing:
    def __init__(self, db: Database, failing: FailingConstructor):
        self.db = db
        self.failing = failing


class PositionalOnly:
    def __init__(self, db: Database, label: str = "x", /):
        self.db = db
        self.label = label


def build_report(title: str, db: Database) -> str:
    """Free function for invoke()"""
    return f"{title}:{db.name}"


def make_database() -> Database:
    return Database()


class LinkedNode:
    """Post-construction call depending on its own class"""

    def __init__(self):
        self.other = None

    def link(self, other: 'LinkedNode'):
        self.other = other

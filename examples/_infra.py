from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field, replace
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str


def set_email(user: User) -> Callable[[str], User]:
    return lambda email: replace(user, email=email)


def get_email(user: User) -> str:
    return user.email


def _empty_domains() -> set[str]:
    return set()


@dataclass(slots=True)
class FakeDomainCheck:
    blocked: set[str] = field(default_factory=_empty_domains)
    delay_seconds: float = 0.0

    async def check(self, email: str) -> Result[str, Failure]:
        await asyncio.sleep(self.delay_seconds)
        domain = email.rpartition("@")[2]
        if domain in self.blocked:
            return Error(Failure(f"domain blocked: {domain}"))
        return Ok(email)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())

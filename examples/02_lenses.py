from __future__ import annotations

from _infra import Failure, FakeDomainCheck, User, banner, get_email, run, set_email

from between import between_fmap_both, between_param_left_fmap_left, lift
from kungfu import Error, LazyCoroResult, Ok, Result


async def main() -> None:
    banner("02_lenses: lens-shaped accessors over Result and LazyCoroResult")

    email = between_param_left_fmap_left(set_email, get_email)
    user = User(id=42, name="Ada", email="ada@example.com")

    # sync: modifier returns Result, the whole update returns Result
    def validate(value: str) -> Result[str, Failure]:
        if "@" not in value:
            return Error(Failure(f"not an email: {value}"))
        return Ok(value.lower())

    for candidate in ("ADA@Example.org", "nope"):
        updated = email(lambda _: validate(candidate))(user)
        match updated:
            case Ok(u):
                print(f"updated: {u}")
            case Error(err):
                print(f"rejected: {err}")

    # async: modifier returns LazyCoroResult, awaited once at the end
    domains = FakeDomainCheck(blocked={"spam.test"}, delay_seconds=0.01)
    for candidate in ("ada@work.test", "ada@spam.test"):
        pending = email(lambda _: LazyCoroResult(lambda: domains.check(candidate)))(user)
        match await pending:
            case Ok(u):
                print(f"checked: {u.email}")
            case Error(err):
                print(f"blocked: {err}")

    # map over every element of a list, both sides lifted
    ids = between_fmap_both(str, abs)(lift.lift(lambda x: x * 10))
    print(ids([-1, 2, -3]))


if __name__ == "__main__":
    run(main)

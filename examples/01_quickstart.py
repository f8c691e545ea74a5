from __future__ import annotations

import operator

from _infra import banner, run

from between import between, between2l, between_param_both, identity, on


async def main() -> None:
    banner("01_quickstart: between + on + between2l + between_param_both")

    # f . h . g with f and g fixed
    shout = between(str.upper, str.strip)
    print(shout(lambda s: s + "!")("  hello "))

    # compare by key
    same_length = on(operator.eq, len)
    print(same_length("abc", "xyz"), same_length("abc", "xy"))

    # g on both arguments, f on the result
    print(between2l(operator.neg, lambda x: x + 1)(operator.add)(3, 4))

    # both boundaries parametrised, independent second argument
    scale_then_shift = between_param_both(
        lambda a: lambda x: x + a,
        lambda a: lambda x: x * a,
    )(identity)
    print(scale_then_shift(2)(5))


if __name__ == "__main__":
    run(main)

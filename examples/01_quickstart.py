from __future__ import annotations

from collections import Counter

from _infra import Request, banner

from apply_also import also, also_mut, apply, fluent


def main() -> None:
    banner("01_quickstart: apply + also + mixins + fluent")

    # Free functions: build a value inside one expression.
    greetings = also_mut({}, lambda it: it.update(hello="world"))
    doubled = apply(256, lambda it: it * 2)
    five = also(5, print)
    print(greetings, doubled, five)

    # Mixins: the same helpers as methods on your own classes.
    request = (
        Request("POST", "https://example.org/users")
        .also_mut(lambda it: it.headers.update({"content-type": "application/json"}))
        .also_mut(lambda it: setattr(it, "body", b'{"name": "ada"}'))
        .also(lambda it: print(f"sending {it.method} {it.url}"))
    )
    print(request.apply(lambda it: len(it.body)))

    # Builtins can't take a mixin: wrap them.
    most_common = (
        fluent(Counter())
        .also_mut(lambda it: it.update("mississippi"))
        .apply(lambda it: it.most_common(1))
        .get()
    )
    print(most_common)


if __name__ == "__main__":
    main()

from __future__ import annotations

from _infra import Request, banner

from apply_also import TracePolicy, Written, fluent_w


def add_auth(request: Request) -> None:
    request.headers["authorization"] = "Bearer token"


def add_tracing(request: Request) -> None:
    request.headers["x-request-id"] = "42"


def main() -> None:
    banner("02_traced_setup: fluent_w + TracePolicy")

    # Locality: plain mutating functions, the trace is written by the chain.
    result = (
        fluent_w(Request("GET", "https://example.org/me"))
        .tell("build request")
        .also_mut(add_auth)
        .also_mut(add_tracing)
        .apply(lambda it: sorted(it.headers))
        .run()
    )

    match result:
        case Written(headers, log):
            print(f"headers: {headers}")
            for entry in log:
                print(f"  {entry}")

    verbose = fluent_w([], policy=TracePolicy.verbose(max_repr=40)).also_mut(
        lambda it: it.extend(range(3))
    )
    print(list(verbose.log))


if __name__ == "__main__":
    main()

from __future__ import annotations

import json

from _infra import Failure, banner
from kungfu import Error, Ok

from apply_also import lift as L


def main() -> None:
    banner("03_catching: try_apply / try_also_mut")

    for raw in ('{"name": "ada"}', "{not json"):
        match L.try_apply(raw, json.loads, on_error=lambda e: Failure(f"bad json: {e}")):
            case Ok(doc):
                print(f"ok: {doc}")
            case Error(err):
                print(f"error: {err}")

    def require_name(doc: dict[str, str]) -> None:
        doc.setdefault("role", "user")
        if "name" not in doc:
            raise KeyError("name")

    match L.try_also_mut({}, require_name, on_error=lambda e: Failure(f"missing {e}")):
        case Ok(doc):
            print(f"ok: {doc}")
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    main()

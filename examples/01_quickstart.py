from __future__ import annotations

from _infra import banner

from reaction import CheckFailedError, Error, Reaction, Success


def parse_port(raw: str) -> int:
    return int(raw)


def main() -> None:
    banner("01_quickstart: on + map + check + fold")

    for raw in ("8080", "http", "0"):
        port = (
            Reaction.on(lambda: parse_port(raw))
            .check("port must be positive", predicate=lambda p: p > 0)
            .map(lambda p: f"listening on :{p}")
        )
        match port:
            case Success(message):
                print(f"  {raw!r} -> {message}")
            case Error(CheckFailedError() as failure):
                print(f"  {raw!r} -> rejected: {failure}")
            case Error(failure):
                print(f"  {raw!r} -> error: {failure!r}")

    fallback = Reaction.on(lambda: parse_port("nope")).recover(lambda e: 80).get()
    print(f"  recovered port: {fallback}")


if __name__ == "__main__":
    main()

"""Reusable steps for the pipeline tests."""

from __future__ import annotations

from conduit.pipeline.exchange import Exchange


def increment(exchange: Exchange) -> Exchange:
    exchange.value = exchange.value + 1
    return exchange


def fail(exchange: Exchange) -> Exchange:
    raise RuntimeError("I've failed!")


def start_at_zero(exchange: Exchange) -> Exchange:
    return exchange.set_value(0)


class Recorder:
    """Step that remembers every exchange it was handed."""

    name = "recorder"

    def __init__(self) -> None:
        self.seen: list[Exchange] = []

    def __call__(self, exchange: Exchange) -> Exchange:
        self.seen.append(exchange)
        return exchange

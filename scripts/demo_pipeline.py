#!/usr/bin/env python3
"""
Demo script: run a small pipeline under each error policy.

Shows a clean run, a bubbled failure, a quiet stop and a
continue-on-error run, plus a step that halts cooperatively.

Usage:
    pip install -e .
    python scripts/demo_pipeline.py
"""

from conduit import Exchange, Pipeline, PipelineStep, StepFailedError
from conduit.core.config import settings
from conduit.core.logging import setup_logging


class ParseNumber(PipelineStep):
    name = "parse_number"
    description = "Turn the raw string payload into an int"

    def process(self, exchange: Exchange) -> Exchange:
        return exchange.set_value(int(exchange.value))


class Double(PipelineStep):
    name = "double"
    description = "Multiply the value by two"

    def process(self, exchange: Exchange) -> Exchange:
        return exchange.set_value(exchange.value * 2)


class StopIfLarge(PipelineStep):
    name = "stop_if_large"
    description = "Halt the run once the value passes 100"

    def process(self, exchange: Exchange) -> Exchange:
        if exchange.value > 100:
            exchange.halt()
        return exchange


def add_one(exchange: Exchange) -> Exchange:
    return exchange.set_value(exchange.value + 1)


def _build(**policy) -> Pipeline:
    return Pipeline(**policy).add_pipes([ParseNumber(), Double(), StopIfLarge(), add_one])


def _print_exchange(title: str, exchange: Exchange) -> None:
    print(f"\n{'─' * 50}")
    print(f"  {title}")
    print(f"  Value        : {exchange.value!r}")
    print(f"  Proceed      : {exchange.proceed}")
    print(f"  Errors       : {len(exchange.errors)}")
    for err in exchange.errors:
        print(f"    ✗ {err.step_name}: {err.cause}")
    print(f"{'─' * 50}")


def run_clean():
    """DEMO 1: every step succeeds."""
    _print_exchange("DEMO 1: clean run, input '20'", _build().run("20"))


def run_bubbled():
    """DEMO 2: default policy raises on the first failure."""
    try:
        _build().run("twenty")
    except StepFailedError as exc:
        print(f"\n  DEMO 2 raised: {exc}")
        _print_exchange("DEMO 2: partial exchange from the error", exc.exchange)


def run_quiet_stop():
    """DEMO 3: failure recorded, run stops."""
    exchange = _build(bubble_errors=False).run("twenty")
    _print_exchange("DEMO 3: bubble_errors=False", exchange)


def run_continue():
    """DEMO 4: failure recorded, later steps still run."""
    pipeline = Pipeline(bubble_errors=False, continue_on_error=True).add_pipes(
        [ParseNumber(), lambda ex: ex.set_value(len(str(ex.value))), add_one]
    )
    _print_exchange("DEMO 4: continue_on_error=True", pipeline.run("twenty"))


def run_halted():
    """DEMO 5: a step stops the run without an error."""
    _print_exchange("DEMO 5: cooperative halt, input '80'", _build().run("80"))


def main():
    setup_logging(
        settings.LOG_LEVEL,
        json_logs=settings.LOG_JSON,
    )

    print("\n╔" + "═" * 48 + "╗")
    print("║          CONDUIT PIPELINE ENGINE DEMO          ║")
    print("╚" + "═" * 48 + "╝")

    run_clean()
    run_bubbled()
    run_quiet_stop()
    run_continue()
    run_halted()

    print("\n✅ All demos completed.\n")


if __name__ == "__main__":
    main()

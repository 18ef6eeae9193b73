"""Command line front end: play an algorithm's steps in the terminal."""

import argparse
import json
import logging
import sys
import time
from typing import Any, List, Optional, Sequence

from algostep.config import Config, PlaybackConfig
from algostep.exceptions import AlgoStepError
from algostep.logger import format_step_row, step_logger
from algostep.playback import PlaybackDriver, PlaybackState
from algostep.registry import Family, available_algorithms, create_producer, get_entry
from algostep.searching import SortednessPolicy
from algostep.steps import Step, StepType
from algostep.traversal import TraversalOrder

MISSING_TOKENS = {"", "null", "none"}


def parse_values(text: str) -> List[Any]:
    """Parse ``"5, 3, null, 8"`` into ``[5, 3, None, 8]``."""
    values: List[Any] = []
    for token in text.split(","):
        token = token.strip()
        if token.lower() in MISSING_TOKENS:
            values.append(None)
            continue
        try:
            values.append(int(token))
        except ValueError:
            try:
                values.append(float(token))
            except ValueError:
                raise argparse.ArgumentTypeError(f"not a number: {token!r}") from None
    return values


def parse_number(text: str) -> Any:
    return parse_values(text)[0]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algostep", description="Step through classic algorithms."
    )
    parser.add_argument(
        "--log-level", default=Config.LOG_LEVEL, help="Logging level (default: %(default)s)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available algorithms")

    run = sub.add_parser("run", help="Play one algorithm")
    run.add_argument("algorithm", help="Algorithm name, e.g. bubble_sort or bubbleSort")
    run.add_argument("values", type=parse_values, help="Comma separated values")
    run.add_argument("--target", type=parse_number, default=None)
    run.add_argument(
        "--order",
        choices=[o.value for o in TraversalOrder],
        default=TraversalOrder.PREORDER.value,
        help="Depth-first visiting order",
    )
    run.add_argument(
        "--policy",
        choices=[p.value for p in SortednessPolicy],
        default=SortednessPolicy.REMAP.value,
        help="How searches that need sorted input treat unsorted input",
    )
    run.add_argument(
        "--delay", type=float, default=None, help="Milliseconds between steps"
    )
    run.add_argument(
        "--initial-pause",
        type=float,
        default=None,
        help="Milliseconds to show the input before the first step",
    )
    run.add_argument("--json", action="store_true", help="Print steps as JSON lines")
    run.add_argument("--trace-html", default=None, help="Write an HTML step trace")
    return parser


def _print_step(step: Step, position: int, as_json: bool) -> None:
    if as_json:
        print(json.dumps(step.to_dict()))
    else:
        number, tag, payload = format_step_row(step, position)
        print(f"{number:>4}  {tag:<10} {payload}")


def _summary(state: PlaybackState, family: Family) -> str:
    if state.error is not None:
        return f"Error: {state.error}"
    if family is Family.SORTING:
        return f"Sorted: {state.array}"
    if family is Family.TRAVERSAL and state.highlight_kind is StepType.COMPLETE:
        return "Traversal: " + " -> ".join(str(v) for v in state.traversal)
    if state.found_index is not None:
        return f"Found at position {state.found_index}"
    return "Target not found"


def run_command(args: argparse.Namespace) -> int:
    entry = get_entry(args.algorithm)
    if entry.family is not Family.TRAVERSAL and None in args.values:
        raise ValueError("Empty slots are only allowed for tree traversals")
    config = PlaybackConfig(sortedness_policy=args.policy)
    delay = args.delay if args.delay is not None else config.delay_for(entry.name)
    initial_pause = (
        args.initial_pause
        if args.initial_pause is not None
        else config.scaled_initial_pause_ms
    )

    producer = create_producer(
        entry.name,
        args.values,
        target=args.target,
        order=args.order,
        policy=config.sortedness_policy,
    )
    state = PlaybackState.for_input(args.values)

    def on_event(step: Step) -> None:
        state.apply(step)
        _print_step(step, state.steps_applied, args.json)

    trace = None
    if args.trace_html:
        step_logger.disabled = False
        step_logger.clear()
        trace = step_logger

    driver = PlaybackDriver(
        delay_ms=delay,
        sleep=time.sleep,
        logger=logging.getLogger(config.logger_name),
        trace=trace,
        initial_pause_ms=initial_pause,
        strict=config.strict,
    )
    driver.run(producer, on_event)

    if trace is not None:
        if state.error is not None:
            trace.error(_summary(state, entry.family))
        else:
            trace.result("Outcome", _summary(state, entry.family))
        trace.write_html(args.trace_html)
    if not args.json:
        print(_summary(state, entry.family))
    return 1 if state.error is not None else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "list":
        for name in available_algorithms():
            print(f"{name:<22} {get_entry(name).family.value}")
        return 0

    try:
        return run_command(args)
    except (AlgoStepError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

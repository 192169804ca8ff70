import itertools
import logging
from typing import Annotated, Any, NoReturn

import srsly
import typer

from rangekit.core.errors import PreconditionFailure
from rangekit.notation import format_range, parse_range
from rangekit.ranges.closed import ClosedRange
from rangekit.ranges.expression import RangeExpression
from rangekit.ranges.half_open import Range
from rangekit.ranges.partial import PartialRangeFrom
from rangekit.slicing import slice_of

app = typer.Typer(help="Evaluate range expressions against values and lists.")
logger = logging.getLogger(__name__)


def _parse_expression(value: str) -> RangeExpression[Any]:
    """Parse range notation. Raises typer.BadParameter on malformed input."""
    try:
        return parse_range(value)
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err


def _parse_bounded(value: str, option: str) -> Range[Any] | ClosedRange[Any]:
    expression = _parse_expression(value)
    if not isinstance(expression, (Range, ClosedRange)):
        raise typer.BadParameter(
            f"{option} must have both bounds ('A..<B' or 'A...B'), "
            f"got '{value}'"
        )
    return expression


def _parse_items(values: list[str]) -> list[int]:
    items: list[int] = []
    for token in values:
        for part in token.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                items.append(int(part))
            except ValueError as err:
                raise typer.BadParameter(
                    f"Invalid item '{part}': expected an integer"
                ) from err
    return items


def _emit(payload: dict[str, Any]) -> None:
    typer.echo(srsly.json_dumps(payload))


def _fail(err: PreconditionFailure) -> NoReturn:
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(1) from err


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG, INFO, WARNING, ERROR)",
        ),
    ] = "WARNING",
) -> None:
    """Range expressions: containment, slicing, clamping and overlap."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'")
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s"
    )


@app.command()
def contains(
    expression: Annotated[str, typer.Argument(help="Range, e.g. '0..<7'")],
    value: Annotated[int, typer.Argument(help="Value to test")],
) -> None:
    """Test whether a value lies in a range expression."""
    try:
        parsed = _parse_expression(expression)
        _emit(
            {
                "expression": format_range(parsed),
                "value": value,
                "contains": parsed.contains(value),
            }
        )
    except PreconditionFailure as err:
        _fail(err)


@app.command(name="slice")
def slice_items(
    expression: Annotated[str, typer.Argument(help="Range, e.g. '...3'")],
    items: Annotated[
        list[str],
        typer.Argument(help="Integer items (space or comma separated)"),
    ],
) -> None:
    """Slice a list of integers with a range expression."""
    try:
        parsed = _parse_expression(expression)
        values = _parse_items(items)
        bounds = parsed.relative(to=values)
        _emit(
            {
                "expression": format_range(parsed),
                "bounds": [bounds.lower_bound, bounds.upper_bound],
                "items": slice_of(values, parsed),
            }
        )
    except PreconditionFailure as err:
        _fail(err)


@app.command()
def clamp(
    range_text: Annotated[str, typer.Argument(help="Range to clamp")],
    limits_text: Annotated[str, typer.Argument(help="Limiting range")],
) -> None:
    """Clamp a range into limits of the same kind."""
    try:
        target = _parse_bounded(range_text, "RANGE")
        limits = _parse_bounded(limits_text, "LIMITS")
        if type(target) is not type(limits):
            raise typer.BadParameter(
                "RANGE and LIMITS must both be half-open or both be closed"
            )
        _emit(
            {
                "range": format_range(target),
                "limits": format_range(limits),
                "clamped": format_range(target.clamped(to=limits)),
            }
        )
    except PreconditionFailure as err:
        _fail(err)


@app.command()
def overlaps(
    first: Annotated[str, typer.Argument(help="First range")],
    second: Annotated[str, typer.Argument(help="Second range")],
) -> None:
    """Report whether two bounded ranges overlap."""
    try:
        a = _parse_bounded(first, "A")
        b = _parse_bounded(second, "B")
        if isinstance(a, ClosedRange) and isinstance(b, Range):
            result = b.overlaps(a)
        else:
            result = a.overlaps(b)  # type: ignore[arg-type]
        _emit(
            {
                "a": format_range(a),
                "b": format_range(b),
                "overlaps": result,
            }
        )
    except PreconditionFailure as err:
        _fail(err)


@app.command()
def iterate(
    expression: Annotated[str, typer.Argument(help="Range to enumerate")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Maximum number of values"),
    ] = None,
) -> None:
    """List the values of a countable range expression."""
    try:
        parsed = _parse_expression(expression)
        if not isinstance(parsed, (Range, ClosedRange, PartialRangeFrom)):
            raise typer.BadParameter(
                f"'{expression}' has no lower bound to count from"
            )
        if isinstance(parsed, PartialRangeFrom) and limit is None:
            raise typer.BadParameter(
                f"'{expression}' is endless; pass --limit"
            )
        produced = iter(parsed)
        if limit is not None:
            produced = itertools.islice(produced, limit)
        _emit({"expression": format_range(parsed), "values": list(produced)})
    except PreconditionFailure as err:
        _fail(err)


@app.command()
def relative(
    expression: Annotated[str, typer.Argument(help="Range expression")],
    start: Annotated[
        int, typer.Option("--start", help="Container start index")
    ],
    end: Annotated[int, typer.Option("--end", help="Container end index")],
) -> None:
    """Realize an expression against a container's index domain."""
    try:
        parsed = _parse_expression(expression)
        domain = Range(lower_bound=start, upper_bound=end)
        bounds = parsed.relative(to=domain)
        logger.debug("realized %s against %s", parsed, domain)
        _emit(
            {
                "expression": format_range(parsed),
                "range": format_range(bounds),
                "lower_bound": bounds.lower_bound,
                "upper_bound": bounds.upper_bound,
            }
        )
    except PreconditionFailure as err:
        _fail(err)


if __name__ == "__main__":
    app()

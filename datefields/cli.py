#!filepath: datefields/cli.py
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from datefields import __version__, logs
from datefields.engine import reconciler
from datefields.fields.catalog import Mode
from datefields.fields.state import EngineState
from datefields.utils.errors import InvalidFieldValue

app = typer.Typer(help="datefields CLI: constrained date/time field editing")


def _mode(utc: bool) -> Mode:
    return Mode.UTC if utc else Mode.LOCAL


def _table(state: EngineState) -> Table:
    table = Table()
    table.add_column("field")
    table.add_column("value", justify="right")
    table.add_column("min", justify="right")
    table.add_column("max", justify="right")

    for name, slot in state.as_dict().items():
        table.add_row(
            name,
            str(slot.value),
            "-" if slot.min is None else str(slot.min),
            "-" if slot.max is None else str(slot.max),
        )
    return table


def _parse_assignment(item: str):
    if "=" not in item:
        raise typer.BadParameter(f"expected FIELD=VALUE, got {item!r}")
    name, raw = item.split("=", 1)
    raw = raw.strip()
    try:
        return name.strip(), int(raw)
    except ValueError:
        # 非整数原样交给 engine，由它抛 InvalidFieldValue
        return name.strip(), raw


@logs.catch("invalid timestamp option")
def _init_state(
    value: Optional[str], min: Optional[str], max: Optional[str], utc: bool
) -> EngineState:
    return reconciler.init(value, min, max, _mode(utc))


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def resolve(
    value: Optional[str] = typer.Option(None, help="composite timestamp (ISO)"),
    min: Optional[str] = typer.Option(None, "--min", help="lower bound (ISO)"),
    max: Optional[str] = typer.Option(None, "--max", help="upper bound (ISO)"),
    utc: bool = typer.Option(False, "--utc", help="interpret fields as UTC"),
):
    """
    显示每个字段的值与当前合法范围
    """
    try:
        state = _init_state(value, min, max, utc)
    except ValueError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    print(_table(state))
    print(f"composite: {state.composite.isoformat()} ({state.mode.value})")


@app.command("set")
def set_(
    assignments: List[str] = typer.Argument(..., help="FIELD=VALUE, e.g. year=1987"),
    value: Optional[str] = typer.Option(None, help="composite timestamp (ISO)"),
    min: Optional[str] = typer.Option(None, "--min", help="lower bound (ISO)"),
    max: Optional[str] = typer.Option(None, "--max", help="upper bound (ISO)"),
    utc: bool = typer.Option(False, "--utc", help="interpret fields as UTC"),
):
    """
    一次性编辑多个字段（month 为 0-indexed）
    """
    values = dict(_parse_assignment(item) for item in assignments)

    try:
        state = _init_state(value, min, max, utc)
        result = reconciler.set_fields(state, values)
    except InvalidFieldValue as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)
    except ValueError as e:
        logs.error(f"[CLI] {e}")
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    print(_table(result.state))
    print(f"composite: {result.state.composite.isoformat()} ({result.state.mode.value})")
    print(f"changed: {result.changed}")


if __name__ == "__main__":
    app()

# python -m datefields.cli set year=1987 --value 1993-07-20T12:30:30

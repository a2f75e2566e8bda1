#!filepath: datekit/cli.py
import math
from email.utils import format_datetime
from functools import wraps
from typing import Optional

import typer
from rich import print

from datekit import __version__, AppConfig, DateTimeUtils, init_logging, logs
from datekit.utils.errors import UserInputError

app = typer.Typer(help="datekit date/time utilities")

# 由 main() callback 填充
_state = {"config": None}


def _config() -> AppConfig:
    if _state["config"] is None:
        _state["config"] = AppConfig.load()
    return _state["config"]


def _user_input(func, value: str):
    try:
        return func(value)
    except ValueError as e:
        raise UserInputError(f"invalid input {value!r}: {e}") from e


def guarded(msg: str):
    """
    - 非预期异常：logs.catch 记录 traceback 后抛出
    - UserInputError：红色提示 + exit 1，不打印 traceback
    """
    def decorator(func):
        logged = logs.catch(msg=msg, ignore=(UserInputError,))(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return logged(*args, **kwargs)
            except UserInputError as e:
                print(f"[red]{e}[/red]")
                raise typer.Exit(code=1)

        return wrapper

    return decorator


@app.callback()
def main(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
):
    _state["config"] = AppConfig.load(config)
    init_logging(_state["config"].log)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
@guarded("rfc2822 failed")
def rfc2822(value: str):
    """
    解析 RFC 2822 日期，输出 ISO 8601
    """
    print(_user_input(DateTimeUtils.parse_rfc2822, value).isoformat())


@app.command()
@guarded("iso8601 failed")
def iso8601(value: str):
    """
    解析 ISO 8601 日期，输出 RFC 2822
    """
    print(format_datetime(_user_input(DateTimeUtils.parse_iso8601, value)))


@app.command("leap-year")
@guarded("leap-year failed")
def leap_year(value: str):
    """
    VALUE 可以是年份（2000）或 ISO 日期（2000-02-01）
    """
    target = _user_input(int, value) if value.isdecimal() else _user_input(DateTimeUtils.parse_iso8601, value)
    print(DateTimeUtils.is_leap_year(target))


@app.command()
@guarded("timespan failed")
def timespan(
    start: str,
    end: str,
    legacy: bool = typer.Option(False, "--legacy", help="render a 1000 ms rounding remainder as .000 without carry"),
):
    """
    START / END 为 ISO 8601 字符串，输出 HH:mm:ss.sss
    """
    s = _user_input(DateTimeUtils.parse_iso8601, start)
    e = _user_input(DateTimeUtils.parse_iso8601, end)
    carry = _config().datetime.carry_millis and not legacy
    print(DateTimeUtils.timespan_to_string(s, e, carry=carry))


@app.command("clock-angle")
@guarded("clock-angle failed")
def clock_angle(
    value: str,
    degrees: bool = typer.Option(False, "--degrees", help="print degrees instead of radians"),
):
    """
    VALUE 为 ISO 8601 字符串，按 UTC 时间计算时针与分针夹角
    """
    angle = DateTimeUtils.angle_between_clock_hands(_user_input(DateTimeUtils.parse_iso8601, value))
    print(math.degrees(angle) if degrees else angle)


if __name__ == "__main__":
    app()

# python -m datekit.cli timespan 2016-01-19T10:00:00Z 2016-01-19T15:20:10.453Z

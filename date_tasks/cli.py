"""
CLI interface for the date tasks.
"""

import logging
import sys
from typing import Any, Callable, Optional

import click

from date_tasks.config.manager import ConfigManager
from date_tasks.core.calendar_search import (
    get_next_friday,
    get_next_friday_the_13th,
    get_week_number_by_date,
)
from date_tasks.core.formatting import format_date, get_time
from date_tasks.core.queries import (
    date_to_timestamp,
    get_count_days_in_month,
    get_count_days_on_period,
    get_day_name,
    get_quarter,
    is_date_in_period,
    is_leap_year,
)
from date_tasks.core.schedule import build_work_schedule, get_count_weekends_in_month
from date_tasks.core.summary import summarize_date
from date_tasks.data.schemas import Config, DatePeriod, WorkScheduleRequest
from date_tasks.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def print_result(label: str, compute: Callable[[], Any]) -> None:
    """Run a calculation and print its result, exiting with status 1 on failure."""
    formatter = ConsoleFormatter()

    try:
        value = compute()
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)

    if hasattr(value, "isoformat"):
        value = value.isoformat()
    formatter.print_value(label, value)


def resolve_format(ctx: click.Context, output_format: Optional[str]) -> str:
    """Use the given output format or fall back to the configured one."""
    return output_format or ctx.obj["config"].output_format


@click.group()
@click.version_option(version="0.1.0", prog_name="date-tasks")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.option(
    "--timezone", "-z",
    default=None,
    help="IANA time zone to read dates in (default: from config or UTC)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
@click.pass_context
def main(ctx: click.Context, config: Optional[str], timezone: Optional[str], verbose: bool):
    """Date Tasks - Date and calendar calculations."""
    formatter = ConsoleFormatter()

    try:
        config_manager = ConfigManager(config)
        cfg = config_manager.load_config()
        if timezone:
            cfg = Config(**{**cfg.model_dump(), "timezone": timezone})
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(logging.DEBUG if verbose else cfg.log_level)
    logger.debug(f"Using time zone {cfg.timezone}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["tz"] = cfg.get_tzinfo()


@main.command()
@click.argument("date")
@click.pass_context
def timestamp(ctx: click.Context, date: str):
    """Milliseconds since 1970-01-01T00:00:00Z."""
    print_result("Timestamp", lambda: date_to_timestamp(date, tz=ctx.obj["tz"]))


@main.command()
@click.argument("date")
@click.pass_context
def time(ctx: click.Context, date: str):
    """Time of day in HH:MM:SS format."""
    print_result("Time", lambda: get_time(date, tz=ctx.obj["tz"]))


@main.command(name="format")
@click.argument("date")
@click.pass_context
def format_command(ctx: click.Context, date: str):
    """Date in M/D/YYYY, H:MM:SS AM/PM format."""
    print_result("Formatted", lambda: format_date(date, tz=ctx.obj["tz"]))


@main.command(name="day-name")
@click.argument("date")
@click.pass_context
def day_name(ctx: click.Context, date: str):
    """Name of the day of the week."""
    print_result("Day", lambda: get_day_name(date, tz=ctx.obj["tz"]))


@main.command()
@click.argument("date")
@click.pass_context
def quarter(ctx: click.Context, date: str):
    """Quarter of the year (1-4)."""
    print_result("Quarter", lambda: get_quarter(date, tz=ctx.obj["tz"]))


@main.command(name="leap-year")
@click.argument("date")
@click.pass_context
def leap_year(ctx: click.Context, date: str):
    """Whether the year of a date (or a bare year) is a leap year."""
    value = int(date) if date.isdigit() else date
    print_result("Leap year", lambda: is_leap_year(value, tz=ctx.obj["tz"]))


@main.command()
@click.argument("date")
@click.pass_context
def week(ctx: click.Context, date: str):
    """Week number of the year (weeks start on Monday)."""
    print_result("Week", lambda: get_week_number_by_date(date, tz=ctx.obj["tz"]))


@main.command(name="next-friday")
@click.argument("date")
@click.pass_context
def next_friday(ctx: click.Context, date: str):
    """Date of the next Friday after a date."""
    print_result("Next Friday", lambda: get_next_friday(date, tz=ctx.obj["tz"]))


@main.command()
@click.argument("date")
@click.pass_context
def friday13(ctx: click.Context, date: str):
    """Date of the next Friday the 13th."""
    print_result("Next Friday the 13th", lambda: get_next_friday_the_13th(date, tz=ctx.obj["tz"]))


@main.command(name="days-in-month")
@click.argument("month", type=int)
@click.argument("year", type=int)
def days_in_month(month: int, year: int):
    """Number of days in a month (1 = January)."""
    print_result("Days", lambda: get_count_days_in_month(month, year))


@main.command()
@click.argument("month", type=int)
@click.argument("year", type=int)
def weekends(month: int, year: int):
    """Number of Saturdays and Sundays in a month (1 = January)."""
    print_result("Weekend days", lambda: get_count_weekends_in_month(month, year))


@main.command(name="period-days")
@click.argument("start")
@click.argument("end")
@click.pass_context
def period_days(ctx: click.Context, start: str, end: str):
    """Number of days in a period, both ends included."""
    print_result("Days", lambda: get_count_days_on_period(start, end, tz=ctx.obj["tz"]))


@main.command(name="in-period")
@click.argument("date")
@click.argument("start")
@click.argument("end")
@click.pass_context
def in_period(ctx: click.Context, date: str, start: str, end: str):
    """Whether DATE lies between START and END, both included."""
    period = DatePeriod(start=start, end=end)
    print_result("In period", lambda: is_date_in_period(date, period, tz=ctx.obj["tz"]))


@main.command()
@click.option(
    "--start", "-s",
    required=True,
    help="Start date (DD-MM-YYYY)",
)
@click.option(
    "--end", "-e",
    required=True,
    help="End date (DD-MM-YYYY)",
)
@click.option(
    "--work", "-w",
    "count_work_days",
    type=int,
    required=True,
    help="Consecutive working days per cycle",
)
@click.option(
    "--off", "-o",
    "count_off_days",
    type=int,
    required=True,
    help="Consecutive days off per cycle",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (default: from config)",
)
@click.pass_context
def schedule(
    ctx: click.Context,
    start: str,
    end: str,
    count_work_days: int,
    count_off_days: int,
    output_format: Optional[str],
):
    """Generate a work schedule of WORK days on and OFF days off."""
    formatter = ConsoleFormatter()

    try:
        request = WorkScheduleRequest(
            period=DatePeriod(start=start, end=end),
            count_work_days=count_work_days,
            count_off_days=count_off_days,
        )
        result = build_work_schedule(request)

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)

    if resolve_format(ctx, output_format) == "json":
        formatter.print_json(result.model_dump_json())
    else:
        formatter.print_schedule(result)


@main.command()
@click.argument("date")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (default: from config)",
)
@click.pass_context
def info(ctx: click.Context, date: str, output_format: Optional[str]):
    """Show every calculated value for a date."""
    formatter = ConsoleFormatter()

    try:
        summary = summarize_date(date, tz=ctx.obj["tz"])
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)

    if resolve_format(ctx, output_format) == "json":
        formatter.print_json(summary.model_dump_json())
    else:
        formatter.print_summary(summary)


@main.command(name="init-config")
@click.argument("output", type=click.Path(dir_okay=False))
@click.pass_context
def init_config(ctx: click.Context, output: str):
    """Write the active configuration to a YAML file."""
    formatter = ConsoleFormatter()

    try:
        ConfigManager().save_config(ctx.obj["config"], output)
    except OSError as e:
        formatter.print_error(f"Could not write config: {e}")
        sys.exit(1)

    formatter.print_success(f"Configuration saved to {output}")


if __name__ == "__main__":
    main()

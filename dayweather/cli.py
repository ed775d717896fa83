"""CLI entry point for daily temperature lookups."""

import argparse
import logging

from dayweather.analysis.summary import summarize_reading
from dayweather.config.loader import get_config_value, load_config, set_config_value
from dayweather.fetcher import fetch_weather_data_sync
from dayweather.reporting.formatters import (
    FETCH_FAILED_MESSAGE,
    format_summary_json,
    format_summary_text,
)

DEFAULT_CONFIG = "dayweather.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dayweather",
        description="Daily min/max temperature from the Open-Meteo archive",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # temps
    temps_p = sub.add_parser("temps", help="Show min/max temperature for a date")
    temps_p.add_argument("date", help="Date (YYYY-MM-DD)")
    temps_p.add_argument(
        "--json", action="store_true", help="Print summary as JSON"
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Validate a config override")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "temps":
        return _cmd_temps(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_temps(config, args) -> int:
    reading = fetch_weather_data_sync(args.date, config.archive)
    if reading is None:
        print(FETCH_FAILED_MESSAGE)
        return 1
    summary = summarize_reading(reading, date=args.date)
    if summary is None:
        print(f"No hourly readings for {args.date}.")
        return 1
    if args.json:
        print(format_summary_json(summary))
    else:
        print(format_summary_text(summary))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

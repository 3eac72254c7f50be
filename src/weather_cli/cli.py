#!/usr/bin/env python3
from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from weather_cli.clients.geolocation import GeolocationClient, GeolocationConfig
from weather_cli.clients.http import HTTPClient, RequestsHTTPClient
from weather_cli.clients.openweathermap import ClientConfig, OpenWeatherMapClient
from weather_cli.config import Settings, load_settings
from weather_cli.errors import InputError, WeatherCliError
from weather_cli.report import render
from weather_cli.utils.logging_config import configure_logging
from weather_cli.utils.terminal import TermColors, colorize

LOGGER = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

OPTION_IP_LOCATION = 1
OPTION_MANUAL_LOCATION = 2

MENU_OPTIONS: Dict[int, str] = {
    OPTION_IP_LOCATION: "Get weather for your location",
    OPTION_MANUAL_LOCATION: "Enter a specific location",
}

InputFunc = Callable[[], str]


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the weather CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-cli",
        description="Show current weather for your IP location or a given place.",
    )
    parser.add_argument(
        "--location",
        default="",
        help="Location for weather information (used with menu option 2)",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Env file supplying OPENWEATHERMAP_API_KEY (default: .env, optional)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        type=str.upper,
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def _write(stream: TextIO, text: str, color: str, newline: bool = True) -> None:
    stream.write(colorize(text, color, stream=stream) + ("\n" if newline else ""))
    stream.flush()


def _prompt(message: str, input_func: InputFunc, stream: TextIO) -> str:
    _write(stream, message, TermColors.GREEN, newline=False)
    try:
        return input_func()
    except EOFError as exc:
        raise InputError("Error reading input: no input received") from exc


def parse_menu_choice(raw: str) -> int:
    """Parse a menu selection, accepting only the listed options.

    Raises:
        InputError: If the value is not an integer or not a menu option.
    """
    try:
        choice = int(raw.strip())
    except ValueError as exc:
        raise InputError(f"Error reading input: '{raw.strip()}' is not a number") from exc
    if choice not in MENU_OPTIONS:
        raise InputError(f"Invalid option '{choice}'. Exiting.")
    return choice


def prompt_menu_choice(input_func: InputFunc, stream: TextIO) -> int:
    _write(stream, "Choose an option:", TermColors.GREEN)
    for number, label in MENU_OPTIONS.items():
        _write(stream, f"{number}. {label}", TermColors.CYAN)
    options = " or ".join(str(number) for number in MENU_OPTIONS)
    return parse_menu_choice(_prompt(f"Enter your choice ({options}): ", input_func, stream))


def determine_location(
    choice: int,
    location_flag: str,
    *,
    settings: Settings,
    http_client: HTTPClient,
    input_func: InputFunc,
    stream: TextIO,
) -> str:
    """
    Turn a menu choice into the location to query.

    Option 1 asks the geolocation service and fails without falling back to
    manual entry. Option 2 uses the --location flag or prompts for one.

    Raises:
        InputError: If no usable location was entered.
        WeatherCliError: If the geolocation lookup fails.
    """
    if choice == OPTION_IP_LOCATION:
        config = GeolocationConfig(
            base_url=settings.geolocation_api_url,
            timeout=settings.request_timeout,
        )
        with GeolocationClient(config=config, http_client=http_client) as client:
            return client.resolve_city()

    location = location_flag.strip()
    if not location:
        location = _prompt("Enter the location: ", input_func, stream).strip()
    if not location:
        raise InputError("Invalid location. Exiting.")
    return location


def show_weather(
    location: str,
    *,
    settings: Settings,
    http_client: HTTPClient,
    stream: TextIO,
) -> None:
    config = ClientConfig(
        base_url=settings.openweathermap_api_url,
        timeout=settings.request_timeout,
    )
    with OpenWeatherMapClient(
        settings.openweathermap_api_key, config=config, http_client=http_client
    ) as client:
        report = client.fetch_current(location)
    render(report, stream)


def run_cli(
    argv: Optional[list[str]] = None,
    *,
    input_func: InputFunc = input,
    stream: Optional[TextIO] = None,
    http_client: Optional[HTTPClient] = None,
) -> int:
    """Execute one interactive run.

    Args:
        argv: Command-line arguments (uses sys.argv if None).
        input_func: Reads one line of user input.
        stream: Output stream for the menu and report (default: stdout).
        http_client: Transport shared by both upstream clients.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    stream = stream if stream is not None else sys.stdout

    owned_client = RequestsHTTPClient() if http_client is None else None
    transport = http_client or owned_client
    try:
        settings = load_settings(args.env_file)
        choice = prompt_menu_choice(input_func, stream)
        location = determine_location(
            choice,
            args.location,
            settings=settings,
            http_client=transport,
            input_func=input_func,
            stream=stream,
        )
        show_weather(location, settings=settings, http_client=transport, stream=stream)
        return EXIT_SUCCESS
    except KeyboardInterrupt:
        stream.write("\n")
        LOGGER.warning("Interrupted. Exiting.")
        return EXIT_INTERRUPTED
    except WeatherCliError as exc:
        LOGGER.error("%s", exc)
        return EXIT_FAILURE
    finally:
        if owned_client is not None:
            owned_client.close()


def main() -> None:  # pragma: no cover - CLI entrypoint
    """CLI entry point."""
    sys.exit(run_cli())


if __name__ == "__main__":  # pragma: no cover - CLI execution path
    main()

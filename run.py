"""Cartographer CLI entry point.

Provides subcommands for generating a map layout in the terminal and for
running the HTTP map server. Accepts configuration via flags and environment
variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 40
DEFAULT_ROOMS = ["medium"] * 6


def _load_version() -> str:
    try:
        with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION"), "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        from cartographer import __version__ as pkg_version

        return pkg_version


__version__ = _load_version()


def parse_room(text: str):
    """Parse SIZE[:TYPE[:h|v]] into a RoomRequest (validated later with the settings)."""
    from cartographer.dungeon import MapConfigError, RoomRequest

    parts = text.split(":")
    if len(parts) > 3 or not parts[0]:
        raise MapConfigError(f"bad room argument {text!r}, expected SIZE[:TYPE[:h|v]]")
    size = parts[0]
    room_type = parts[1] if len(parts) > 1 and parts[1] else "room"
    is_horizontal = None
    if len(parts) == 3:
        if parts[2] not in ("h", "v"):
            raise MapConfigError(f"bad orientation {parts[2]!r} in {text!r}, expected h or v")
        is_horizontal = parts[2] == "h"
    return RoomRequest(size=size, room_type=room_type, is_horizontal=is_horizontal)


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Cartographer Map Generator

    Generate chained room-and-door map layouts in the terminal, or run the
    HTTP server that returns them as JSON. Configuration can be provided via
    CLI flags or environment variables. If both are present, CLI flags take
    precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                       Bind address for the web server (default: 0.0.0.0)
          PORT                       Port for the web server (default: 5000)
          CARTOGRAPHER_GRID_WIDTH    Default grid width for `generate` (default: 40)
          CARTOGRAPHER_GRID_HEIGHT   Default grid height for `generate` (default: 40)
          CARTOGRAPHER_LOG_LEVEL     debug|info|warn|error (default: info)

        Examples:
          # Six medium rooms on a 40x40 grid
          python run.py generate

          # A fixed seed, a hallway and a throne room, printed as JSON
          python run.py generate --seed 7 --room small --room large:hallway:h --room large:throne --json

          # Show the occupancy grid under the summary
          python run.py generate --width 24 --height 16 --room small --room medium --show-grid

          # Run the server on a custom port
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="Cartographer",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Cartographer {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a map layout and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a chained room layout and print a summary or JSON",
    )
    gen_parser.add_argument("--width", type=int, default=None, help="Grid width (default: env or 40)")
    gen_parser.add_argument("--height", type=int, default=None, help="Grid height (default: env or 40)")
    gen_parser.add_argument(
        "--room",
        dest="rooms",
        action="append",
        default=None,
        metavar="SIZE[:TYPE[:h|v]]",
        help="Room request; repeat in placement order (default: six medium rooms)",
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    gen_parser.add_argument(
        "--door-types",
        dest="door_types",
        default="placeholder",
        help="Door type mode: placeholder, weighted or weighted_secret",
    )
    gen_parser.add_argument("--json", action="store_true", help="Print the layout as JSON")
    gen_parser.add_argument("--show-grid", dest="show_grid", action="store_true", help="Print the occupancy grid")
    gen_parser.set_defaults(command="generate")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the HTTP map server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask map generation server",
    )
    server_parser.add_argument("--host", default=None, help="Host interface to bind (default: env HOST or 0.0.0.0)")
    server_parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: env PORT or 5000)")
    server_parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def label(text: str) -> str:
    return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def value(val) -> str:
    return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)


def format_summary(layout, requested: int) -> list[str]:
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    title = f"{Fore.CYAN}{Style.BRIGHT}Cartographer Map{Style.RESET_ALL}" if _COLOR_ENABLED else "Cartographer Map"
    lines = [
        divider,
        f"  {title}",
        divider,
        f"  {label('Seed:'):12} {value(layout.seed)}",
        f"  {label('Grid:'):12} {value(f'{layout.grid_width}x{layout.grid_height}')}",
        f"  {label('Rooms:'):12} {value(f'{len(layout.rooms)}/{requested} placed')}",
        divider,
    ]
    for room in layout.rooms:
        lines.append(
            f"  #{room.number} {room.size} {room.room_type} at ({room.x},{room.y}) {room.width}x{room.height}"
        )
        for door in room.doors:
            lock = " locked" if door.locked else ""
            lines.append(
                f"      {door.type}{lock} {door.direction} at ({door.x},{door.y}) {door.width}x{door.height}"
            )
    return lines


def grid_dimension(flag, env_name: str, default: int) -> int:
    """Flag value if given (even 0), else the environment, else ``default``."""
    from cartographer.dungeon import MapConfigError

    if flag is not None:
        return flag
    raw = os.getenv(env_name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise MapConfigError(f"{env_name} must be an integer, got {raw!r}") from None


def run_generate(args) -> int:
    from cartographer.dungeon import MapConfigError, MapSettings, generate_map

    try:
        width = grid_dimension(args.width, "CARTOGRAPHER_GRID_WIDTH", DEFAULT_WIDTH)
        height = grid_dimension(args.height, "CARTOGRAPHER_GRID_HEIGHT", DEFAULT_HEIGHT)
        rooms = [parse_room(arg) for arg in (args.rooms or DEFAULT_ROOMS)]
        settings = MapSettings(
            grid_width=width,
            grid_height=height,
            rooms=rooms,
            seed=args.seed,
            door_types=args.door_types,
        )
        settings.validate()
    except MapConfigError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    if args.json:
        # Keep stdout parseable
        os.environ.setdefault("CARTOGRAPHER_LOG_LEVEL", "warn")
    layout = generate_map(settings)
    if args.json:
        print(json.dumps(layout.to_dict(include_grid=args.show_grid), indent=2))
        return 0
    print("\n".join(format_summary(layout, len(rooms))))
    if args.show_grid:
        print("\n".join(layout.dump()))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    from cartographer.logging_utils import log
    from cartographer.server import start_server

    log.info(event="startup", mode=mode, host=host, port=port)
    start_server(host, port, bool(getattr(args, "debug", False)))
    return 0


def cli():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()

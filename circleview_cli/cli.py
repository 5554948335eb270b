"""
circleview CLI - Main entry point.

Renders circular avatars from image files and prints composite geometry.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional, Tuple

from circleview import (
    CircleImageView,
    FitMode,
    InvalidBorder,
    InvalidDimension,
    Rgba,
    ViewConfig,
    Viewport,
    build_descriptor,
    load_source_image,
    save_image,
)
from circleview.logging import LogEvent, StructuredLogger, create_logger


def parse_size(value: str) -> Tuple[int, int]:
    """
    Parse 'WxH' (or a single 'N' for a square).

    Raises:
        argparse.ArgumentTypeError: If the value is malformed
    """
    parts = value.lower().split("x")
    try:
        if len(parts) == 1:
            side = int(parts[0])
            return (side, side)
        if len(parts) == 2:
            return (int(parts[0]), int(parts[1]))
    except ValueError:
        pass
    raise argparse.ArgumentTypeError(f"Invalid size '{value}', expected WxH or N")


def build_config(args: argparse.Namespace, logger: Optional[StructuredLogger] = None) -> ViewConfig:
    """Config file first, then command-line overrides."""
    config = ViewConfig()
    if args.config:
        config = ViewConfig.from_yaml(args.config)
        if logger is not None:
            logger.info(
                event=LogEvent.CONFIG_LOADED,
                message=f"Loaded view config {args.config}",
                metadata={'path': str(args.config), 'fit_mode': config.fit_mode.value},
            )

    if args.border_color is not None:
        color = config.palette.get(args.border_color) or Rgba.from_hex(args.border_color)
        config = replace(config, border_color=color)
    if args.border_width is not None:
        config = replace(config, border_width=args.border_width)
    if args.fit_mode is not None:
        config = replace(config, fit_mode=FitMode.parse(args.fit_mode))

    return config


def run_render(args: argparse.Namespace, logger: StructuredLogger) -> None:
    config = build_config(args, logger)

    if args.width is not None or args.height is not None:
        if args.width is None or args.height is None:
            raise ValueError("--width and --height must be given together")
        size = (args.width, args.height)
    else:
        size = (args.size, args.size)

    view = CircleImageView(config, logger=logger)
    view.set_image(load_source_image(args.input, logger=logger))
    view.set_size(*size)

    pixels = view.render()
    save_image(pixels, args.output, logger=logger)
    print(f"Created circular image: {args.output} ({size[0]}x{size[1]})")


def run_geometry(args: argparse.Namespace, logger: StructuredLogger) -> None:
    config = build_config(args, logger)
    viewport = Viewport(*args.viewport)

    # Geometry only needs the source size, no pixels are decoded
    descriptor = build_descriptor(args.source, viewport, config.border, config.fit_mode)
    print(json.dumps(descriptor.to_dict(), indent=2))


def error_event(exc: Exception) -> LogEvent:
    """Map a CLI failure to its error.* event."""
    if isinstance(exc, InvalidDimension):
        return LogEvent.INVALID_DIMENSION_ERROR
    if isinstance(exc, InvalidBorder):
        return LogEvent.INVALID_BORDER_ERROR
    if isinstance(exc, OSError):
        return LogEvent.IMAGE_IO_ERROR
    return LogEvent.CONFIG_ERROR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circleview",
        description="circleview CLI - Render images clipped to a circle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 200x200 avatar with a 4px white ring
  circleview render photo.jpg avatar.png --size 200 --border-width 4 --border-color "#ffffff"

  # Letterbox instead of center-crop
  circleview render banner.png round.png --size 256 --fit-mode contain

  # Style from YAML, overriding the width
  circleview render photo.jpg avatar.png --config config/avatar_view.yaml --border-width 2

  # Inspect the geometry without drawing
  circleview geometry --source 200x100 --viewport 100x100 --border-width 4 --border-color "#000000"
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    def add_style_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument('--config', help='Path to view config YAML')
        sub.add_argument('--border-width', type=float, default=None, help='Ring width in pixels')
        sub.add_argument('--border-color', default=None, help='Ring color (#rrggbb[aa] or palette name)')
        sub.add_argument(
            '--fit-mode',
            choices=[m.value for m in FitMode],
            default=None,
            help='Image fit mode (default: cover)'
        )
        sub.add_argument('-v', '--verbose', action='store_true', help='Emit JSON debug logs')

    render = subparsers.add_parser('render', help='Render an image file as a circle')
    render.add_argument('input', help='Source image path')
    render.add_argument('output', help='Output image path (PNG keeps transparency)')
    render.add_argument('--size', type=int, default=200, help='Square output size (default: 200)')
    render.add_argument('--width', type=int, default=None, help='Output width')
    render.add_argument('--height', type=int, default=None, help='Output height')
    add_style_arguments(render)

    geometry = subparsers.add_parser('geometry', help='Print composite geometry as JSON')
    geometry.add_argument('--source', type=parse_size, required=True, help='Source size WxH')
    geometry.add_argument('--viewport', type=parse_size, required=True, help='Viewport size WxH')
    add_style_arguments(geometry)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli", level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.command == 'render':
            run_render(args, logger)
        elif args.command == 'geometry':
            run_geometry(args, logger)
    except (ValueError, KeyError, OSError) as e:
        logger.error(event=error_event(e), message=str(e), exc_info=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())

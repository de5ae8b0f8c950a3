"""Command-line interface for trigrameyes.

Reads one or more screenshots, prints or emits the trigram grid found in
each, and decodes it with the selected method.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="trigrameyes",
        description="Recover trigram-eye messages from screenshots",
    )
    parser.add_argument(
        "paths", nargs="+", type=Path,
        help="Image files containing eye messages",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/trigrameyes.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-p", "--print",
        dest="print_grid", action="store_true", default=None,
        help="Print the trigram grid of each image",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the trigram grid of each image as JSON",
    )
    parser.add_argument(
        "-m", "--method", type=str, default=None,
        help="Decode method (default from config: unique_triangles)",
    )
    parser.add_argument(
        "--alphabet", type=Path, default=None,
        help="YAML table mapping canonical indices to glyphs",
    )
    parser.add_argument(
        "--annotate", type=Path, default=None,
        help="Directory to write images with detected eyes marked",
    )
    return parser.parse_args(argv)


def _print_grid(grid) -> None:
    for row in grid.to_strings():
        print(" ".join(row))


def _process_image(path: Path, decoder, settings, args, alphabet) -> None:
    """Decode one image and write its output.

    Raises:
        ImageLoadError: If the image cannot be loaded.
        OverlayWriteError: If the debug overlay cannot be saved.
        DecodeError: If a fatal decoding invariant fails.
    """
    from trigrameyes.decode.decoder import grid_to_json
    from trigrameyes.utils.imaging import draw_eye_overlay, load_rgba, save_overlay

    image = load_rgba(path)
    scan, directions = decoder.read_eyes(image)
    grid = decoder.assemble(scan, directions)

    annotate_dir = args.annotate or settings.output.annotate_dir
    if annotate_dir:
        canvas = draw_eye_overlay(image, list(zip(scan.eyes, directions)))
        save_overlay(canvas, Path(annotate_dir) / f"{path.stem}_eyes.png")

    message = decoder.decode_grid(grid)

    print(f"== {path}")
    if settings.output.print_grid:
        _print_grid(grid)
    if args.json:
        print(grid_to_json(grid, indent=settings.output.json_indent))
    if message.method is not None:
        for row in message.indices:
            print(" ".join(f"{index:3d}" for index in row))
        if alphabet is not None:
            for line in alphabet.render(message.indices):
                print(line)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the trigrameyes CLI."""
    args = parse_args(argv)

    from trigrameyes.config.settings import load_settings
    from trigrameyes.decode import (
        AlphabetLoadError,
        AlphabetTable,
        DecodeError,
        Decoder,
        UnknownDecodeMethod,
        get_method,
    )
    from trigrameyes.grid.mapper import GridMapper
    from trigrameyes.utils.imaging import ImageLoadError, OverlayWriteError
    from trigrameyes.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"
    if args.print_grid is not None:
        settings.output.print_grid = args.print_grid

    setup_logging(settings.logging)

    method = None
    method_name = args.method or settings.decode.method
    if method_name:
        try:
            method = get_method(method_name)
        except UnknownDecodeMethod as e:
            logger.warning("%s; skipping decoding", e)
            print("unknown trigram decode method specified.")

    alphabet = None
    alphabet_path = args.alphabet or settings.decode.alphabet_path
    if alphabet_path and method is not None:
        try:
            alphabet = AlphabetTable.from_yaml(alphabet_path)
        except AlphabetLoadError as e:
            logger.error("%s", e)
            sys.exit(1)

    decoder = Decoder(method=method, mapper=GridMapper(settings.grid))

    failures = 0
    for path in args.paths:
        logger.info("Processing %s", path)
        try:
            _process_image(path, decoder, settings, args, alphabet)
        except (ImageLoadError, OverlayWriteError) as e:
            failures += 1
            logger.error("%s", e)
        except DecodeError as e:
            failures += 1
            logger.error("Decoding %s failed: %s", path, e)

    if failures:
        logger.error("%d of %d images failed", failures, len(args.paths))
        sys.exit(1)


if __name__ == "__main__":
    main()

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from psshapes import (
    Shape,
    InvalidGeometry,
    DocumentConfig,
    Rotation,
    load_composition,
    write_postscript,
    make_circle,
    make_rectangle,
    make_spacer,
    make_polygon,
    make_square,
    make_triangle,
    make_rotated_shape,
    make_layered_shape,
    make_vertical_shape,
    make_horizontal_shape,
)


def build_demo() -> Shape:
    # the same square is shared by two parents
    square = make_square(40)
    row = make_horizontal_shape(
        make_circle(20),
        make_spacer(10, 10),
        square,
        make_spacer(10, 10),
        make_triangle(40),
    )
    badge = make_layered_shape(make_circle(30), square, make_polygon(8, 15))
    return make_vertical_shape(
        row,
        make_rotated_shape(make_rectangle(60, 20), Rotation.R90),
        badge,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a shape composition to PostScript.")
    p.add_argument("composition", nargs="?", help="path to a composition JSON file")
    p.add_argument("--demo", action="store_true", help="render the built-in demo composition")
    p.add_argument("--out", type=str, default="plots/composition.ps", help="output PostScript path")
    p.add_argument(
        "--origin",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        default=(306.0, 396.0),
        help="page point the shape is centered on (default: 306 396)",
    )
    p.add_argument("--line-width", type=float, default=None, help="stroke width in points")
    p.add_argument("--preview", type=str, default=None, help="also write a .png or .svg preview")
    p.add_argument("--print-size", action="store_true", help="print the composition's width and height")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = p.parse_args(argv)
    if not args.demo and not args.composition:
        p.error("give a composition JSON path or --demo")
    if args.demo and args.composition:
        p.error("--demo and a composition path are mutually exclusive")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        shape = build_demo() if args.demo else load_composition(args.composition)
    except (InvalidGeometry, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.print_size:
        print(f"width={shape.get_width():g} height={shape.get_height():g}")

    config = DocumentConfig(origin=tuple(args.origin), line_width=args.line_width)
    try:
        out_path = write_postscript(shape, args.out, config)
    except OSError as e:
        print(f"error: cannot write {args.out}: {e}", file=sys.stderr)
        return 1
    print(f"Wrote: {out_path}")

    if args.preview:
        # matplotlib is only needed for previews
        from plotting import render_to_file

        try:
            render_to_file(shape, args.preview)
        except (ValueError, OSError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(f"Wrote: {args.preview}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..models.area_config import AreaConfig
from ..models.errors import PlotAreaError
from ..models.thresholds import ClassThresholds
from ..pipeline.batch_measure import PLOT_DIR, measure_paths, records_to_frame
from ..services.image_service import ImageService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SOME_FAILED = 1
EXIT_ABORTED = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="plotarea",
        description="Estimate boundary and interior areas (pixel²) of hand-drawn property maps.",
    )
    ap.add_argument("path", help="image file or directory of images")
    ap.add_argument("--slack", type=int, default=None,
                    help="padding around the region marker, pixels (env AREA_SLACK, default 5)")
    ap.add_argument("--jump", type=int, default=None,
                    help="row stride for the scanline pass (env AREA_JUMP, default 1)")
    ap.add_argument("--recursive", action="store_true", help="descend into sub-directories")
    ap.add_argument("--workers", type=int, default=int(os.getenv("AREA_WORKERS", "1")),
                    help="worker processes for a directory (env AREA_WORKERS)")
    ap.add_argument("--strict", action="store_true",
                    help="abort on the first image that cannot be measured")
    ap.add_argument("--plot-dir", nargs="?", const=PLOT_DIR, default=None,
                    help=f"write diagnostic renders (default dir: {PLOT_DIR})")
    ap.add_argument("--csv", default=None, help="write the results table to this CSV file")
    ap.add_argument("--check-simple", action="store_true",
                    help="warn when a boundary polygon self-intersects")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging")

    thr = ap.add_argument_group("colour thresholds (override env)")
    thr.add_argument("--marker-g-min", type=float, default=None)
    thr.add_argument("--marker-rb-max", type=float, default=None)
    thr.add_argument("--boundary-r-min", type=float, default=None)
    thr.add_argument("--boundary-gb-max", type=float, default=None)
    thr.add_argument("--interior-min", type=float, default=None)
    thr.add_argument("--interior-max", type=float, default=None)
    return ap


NO_INTERIOR = "NO_INTERIOR"


def _format_area(value) -> str:
    if value is None:
        return NO_INTERIOR
    return f"{value:.1f}"


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        thresholds = ClassThresholds.from_env(
            marker_g_min=args.marker_g_min,
            marker_rb_max=args.marker_rb_max,
            boundary_r_min=args.boundary_r_min,
            boundary_gb_max=args.boundary_gb_max,
            interior_min=args.interior_min,
            interior_max=args.interior_max,
        )
        config = AreaConfig.from_env(slack=args.slack, jump=args.jump,
                                     thresholds=thresholds,
                                     check_simple=args.check_simple or None)
    except ValueError as err:
        logger.error("Invalid configuration: %s", err)
        return EXIT_ABORTED

    target = Path(args.path)
    if target.is_dir():
        paths = ImageService().list_gallery(target, recursive=args.recursive)
        logger.info("Found %d image(s) in %s", len(paths), target)
    else:
        paths = [target]

    try:
        records = measure_paths(
            paths, config,
            workers=args.workers,
            strict=args.strict,
            plot_dir=args.plot_dir,
            progress=target.is_dir(),
        )
    except (PlotAreaError, FileNotFoundError) as err:
        logger.error("Aborted: %s", err)
        return EXIT_ABORTED

    for record in records:
        if record.status == "ok":
            print(f"{record.file}\t{_format_area(record.boundary_area)}\t"
                  f"{_format_area(record.interior_area)}")
        else:
            print(f"{record.file}\tFAILED {record.reason}")

    if args.csv:
        records_to_frame(records).to_csv(args.csv, index=False)
        logger.info("Results table written to %s", args.csv)

    failed = sum(r.status != "ok" for r in records)
    if failed:
        logger.warning("%d of %d image(s) could not be measured", failed, len(records))
        return EXIT_SOME_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

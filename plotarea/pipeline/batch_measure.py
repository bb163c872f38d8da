"""
Batch measurement over a gallery of property maps.

Images are independent of one another, so a directory can be fanned out
over a process pool.  Image-level failures are either recorded and skipped
(default) or re-raised to abort the batch (strict mode).
"""
from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Iterable, List, Sequence

import pandas as pd
from dotenv import load_dotenv
from tqdm import tqdm

from ..models.area_config import AreaConfig
from ..models.area_estimate import MeasurementRecord
from ..models.errors import PlotAreaError
from ..models.image import Image
from ..services.image_service import ImageService
from ..services.rendering_service import RenderingService
from .area_estimator import estimate_areas

logger = logging.getLogger(__name__)

# env‑vars
load_dotenv()
PLOT_DIR = os.getenv("PLOT_DIR_PATH", "data/plots")
PLOT_EXT = ".png"

RECORD_COLUMNS = [
    "file", "boundary_area", "interior_area", "interior_fraction",
    "boundary_rows", "interior_rows", "status", "reason",
]


def measure_image(
    img: Image,
    config: AreaConfig,
    *,
    strict: bool = False,
    plot_dir: str | Path | None = None,
) -> MeasurementRecord:
    """
    Estimate one image and turn the outcome into a report row.
    With *plot_dir* set, a diagnostic render is written next to the results.
    """
    name = str(img.path) if img.path else "<memory>"
    try:
        estimate = estimate_areas(img, config)
    except PlotAreaError as err:
        if strict:
            raise
        logger.warning("Skipping %s: %s", name, err)
        return MeasurementRecord.failed(name, str(err))

    if plot_dir is not None:
        rendering_service = RenderingService()
        stem = Path(img.path).stem if img.path else "memory"
        out_path = Path(plot_dir) / f"{stem}_areas{PLOT_EXT}"
        rendering_service.save(rendering_service.render(img, estimate), out_path)

    record = MeasurementRecord.from_estimate(estimate)
    record.file = name
    return record


def _measure_path(
    path: Path,
    config: AreaConfig,
    strict: bool,
    plot_dir: str | Path | None,
) -> MeasurementRecord:
    """Worker entry point: load then measure a single file."""
    try:
        img = ImageService().load(path)
    except FileNotFoundError as err:
        if strict:
            raise
        logger.warning("Skipping %s: %s", path, err)
        return MeasurementRecord.failed(str(path), str(err))
    return measure_image(img, config, strict=strict, plot_dir=plot_dir)


def measure_paths(
    paths: Sequence[str | Path],
    config: AreaConfig | None = None,
    *,
    workers: int = 1,
    strict: bool = False,
    plot_dir: str | Path | None = None,
    progress: bool = False,
) -> List[MeasurementRecord]:
    """
    Measure every file in *paths*.  Results keep the input order regardless
    of how many workers are used.  In strict mode the error raised is the
    one of the earliest failing file in input order, and files not yet
    started are cancelled.
    """
    config = config or AreaConfig()
    paths = [Path(p) for p in paths]
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if workers == 1 or len(paths) < 2:
        iterator = tqdm(paths, desc="Measuring", unit="img", disable=not progress)
        return [_measure_path(p, config, strict, plot_dir) for p in iterator]

    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_measure_path, p, config, strict, plot_dir)
            for p in paths
        ]
        try:
            return [
                future.result()
                for future in tqdm(futures, desc="Measuring", unit="img", disable=not progress)
            ]
        except BaseException:
            executor.shutdown(wait=True, cancel_futures=True)
            raise


def measure_gallery(
    gallery: Iterable[Image],
    config: AreaConfig | None = None,
    *,
    strict: bool = False,
    plot_dir: str | Path | None = None,
) -> List[MeasurementRecord]:
    """Sequential measurement of already decoded images."""
    config = config or AreaConfig()
    return [measure_image(img, config, strict=strict, plot_dir=plot_dir) for img in gallery]


def records_to_frame(records: Iterable[MeasurementRecord]) -> pd.DataFrame:
    rows = [{col: getattr(r, col) for col in RECORD_COLUMNS} for r in records]
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)

"""Command-line interface for the AIS navigation log reader."""
import json
import logging
from typing import List, Optional

import typer

from .config import load_config
from .exceptions import FormatError
from .io.writer import generate_vessel_catalog, write_fixes
from .pipeline import NavLogPipeline

app = typer.Typer(help="AIS Navigation Log Reader CLI")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_block(title: str, values: dict):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    for key, value in values.items():
        if isinstance(value, float):
            print(f"{key}: {value:.2f}")
        else:
            print(f"{key}: {value}")
    print("=" * 60)


def run_pipeline(config: str, paths: List[str], mmsi: Optional[List[int]]):
    logger.info(f"Loading configuration from {config}")
    pipeline_config = load_config(config)
    pipeline = NavLogPipeline(pipeline_config)

    try:
        df = pipeline.run(paths, mmsi)
    except FormatError as e:
        logger.error(f"Invalid input files: {e}")
        raise typer.Exit(1)
    except OSError as e:
        logger.error(f"Failed to read input files: {e}")
        raise typer.Exit(1)

    return pipeline, df


@app.command()
def process(
    paths: List[str] = typer.Argument(..., help="AIS log files (.csv or .aistext)"),
    mmsi: Optional[List[int]] = typer.Option(None, "--mmsi", "-m", help="Vessel MMSI to keep (repeatable)"),
    config: str = typer.Option("config/default.yaml", "--config", "-c", help="Configuration file path"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write navigation fixes to this file"),
    output_stats: Optional[str] = typer.Option(None, "--output-stats", "-s", help="Output stats to JSON file"),
):
    """Read AIS log files into a clean, time-ordered set of navigation fixes."""
    pipeline, df = run_pipeline(config, paths, mmsi)

    stats = {key: value for key, value in pipeline.stats.items() if key != "sentinel_counts"}
    print_block("PROCESSING STATISTICS", stats)
    if pipeline.stats.get("sentinel_counts"):
        print_block("UNDECODABLE FIELDS", pipeline.stats["sentinel_counts"])

    if output:
        output_config = pipeline.config.output
        write_fixes(
            df,
            output,
            format=output_config.format,
            compression=output_config.compression,
            compression_level=output_config.compression_level,
            row_group_size=output_config.row_group_size,
        )

    if output_stats:
        with open(output_stats, "w") as f:
            json.dump(pipeline.stats, f, indent=2)
        logger.info(f"Statistics written to {output_stats}")


@app.command()
def catalog(
    paths: List[str] = typer.Argument(..., help="AIS log files (.csv or .aistext)"),
    mmsi: Optional[List[int]] = typer.Option(None, "--mmsi", "-m", help="Vessel MMSI to keep (repeatable)"),
    config: str = typer.Option("config/default.yaml", "--config", "-c", help="Configuration file path"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write the catalog to this CSV file"),
):
    """Summarize the navigation fixes of each vessel."""
    _, df = run_pipeline(config, paths, mmsi)
    catalog_df = generate_vessel_catalog(df)

    print("\n" + "=" * 60)
    print("VESSEL CATALOG")
    print("=" * 60)
    for row in catalog_df.iter_rows(named=True):
        print(f"{row['mmsi']} {row['ship_name']!r}: {row['num_fixes']} fixes, "
              f"{row['duration_hours'] or 0.0:.2f} hours")
    print("=" * 60)

    if output:
        catalog_df.write_csv(output)
        logger.info(f"Catalog written to {output}")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()

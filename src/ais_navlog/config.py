"""Configuration management for the AIS navigation log reader."""
import yaml
import logging
from typing import Dict, Any
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class ReaderConfig:
    """Input format configuration."""
    delimiter: str = ","
    field_count: int = 22
    encoding: str = "utf-8"
    timestamp_format: str = "%Y-%m-%d %H:%M:%S%.f"
    epoch: str = "0001-01-01 00:00:00"


@dataclass
class RepairConfig:
    """Malformed line repair configuration."""
    enabled: bool = True
    spurious_delimiter_ordinal: int = 14


@dataclass
class OutputConfig:
    """Output configuration."""
    format: str = "parquet"
    compression: str = "zstd"
    compression_level: int = 3
    row_group_size: int = 100_000


@dataclass
class ProcessingConfig:
    """Processing configuration."""
    show_progress: bool = False


@dataclass
class PipelineConfig:
    """Complete pipeline configuration."""
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    repair: RepairConfig = field(default_factory=RepairConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    processing: ProcessingConfig = field(default_factory=ProcessingConfig)

    @classmethod
    def from_yaml(cls, path: str) -> "PipelineConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML config file

        Returns:
            PipelineConfig instance
        """
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Config file {path} not found, using defaults")
            data = {}
        except yaml.YAMLError as e:
            logger.error(f"Error parsing config {path}: {e}")
            data = {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PipelineConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            PipelineConfig instance
        """
        config = cls()

        # Parse reader config
        reader_data = data.get("reader", {})
        config.reader = ReaderConfig(
            delimiter=reader_data.get("delimiter", ","),
            field_count=reader_data.get("field_count", 22),
            encoding=reader_data.get("encoding", "utf-8"),
            timestamp_format=reader_data.get("timestamp_format", "%Y-%m-%d %H:%M:%S%.f"),
            epoch=str(reader_data.get("epoch", "0001-01-01 00:00:00")),
        )

        # Parse repair config
        repair_data = data.get("repair", {})
        config.repair = RepairConfig(
            enabled=repair_data.get("enabled", True),
            spurious_delimiter_ordinal=repair_data.get("spurious_delimiter_ordinal", 14),
        )

        # Parse output config
        output_data = data.get("output", {})
        config.output = OutputConfig(
            format=output_data.get("format", "parquet"),
            compression=output_data.get("compression", "zstd"),
            compression_level=output_data.get("compression_level", 3),
            row_group_size=output_data.get("row_group_size", 100_000),
        )

        # Parse processing config
        processing_data = data.get("processing", {})
        config.processing = ProcessingConfig(
            show_progress=processing_data.get("show_progress", False),
        )

        return config


def load_config(path: str = "config/default.yaml") -> PipelineConfig:
    """Load pipeline configuration from file.

    Args:
        path: Path to configuration file

    Returns:
        PipelineConfig instance
    """
    return PipelineConfig.from_yaml(path)

"""
sdo-inspect - Main entry point.

Renders SDO_GEOMETRY records for human inspection and compares pairs of
records for structural equality.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from sdo_geom import classify, config as config_module, geometry
from sdo_geom.codes import ElementType, GeomType, Interpretation
from sdo_geom.config import CodecConfig
from sdo_geom.geometry import SdoGeometry
from sdo_geom.logging import create_logger, LogEvent

logger = create_logger("inspect")


def load_records(records_path: str) -> List[Dict[str, Any]]:
    """
    Load geometry records from a YAML (or JSON) file.

    The file holds a single record, a list of records, or a mapping with a
    ``geometries`` list.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid YAML or holds no records
    """
    path = Path(records_path)

    if not path.exists():
        raise FileNotFoundError(f"Records file not found: {records_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {records_path}: {e}")

    if isinstance(data, dict) and "geometries" in data:
        data = data["geometries"]
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not data:
        raise ValueError(f"No geometry records in {records_path}")
    return data


def _code_name(enum_cls, value: int) -> str:
    try:
        return enum_cls(value).name
    except ValueError:
        return str(value)


def describe(geom: SdoGeometry) -> List[str]:
    """Diagnostic rendering plus one line per element."""
    lines = [
        str(geom),
        f"  type={_code_name(GeomType, geom.geom_type)} "
        f"dim={geom.ord_dim} lrs_dim={geom.lrs_dim} "
        f"compact_point={geom.is_compact_point()}",
    ]
    for i, triplet in enumerate(geom.triplets()):
        lines.append(
            f"  [{i}] offset={triplet.start_offset} "
            f"etype={_code_name(ElementType, triplet.e_type)} "
            f"interpretation={_code_name(Interpretation, triplet.interpretation)} "
            f"ordinates={len(geom.element_ordinates(i))}"
        )
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="sdo-inspect - Render and compare SDO_GEOMETRY records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render every record in a file
  sdo-inspect records.yaml

  # Reject malformed element directories
  sdo-inspect --config codec.yaml records.yaml

  # Check two records for structural equality (exit code 1 if different)
  sdo-inspect --compare pair.yaml
"""
    )
    parser.add_argument('records', help='Path to records YAML/JSON')
    parser.add_argument(
        "--config",
        default=None,
        help="Path to codec config YAML (default: built-in defaults)"
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Compare exactly two records for structural equality"
    )

    args = parser.parse_args(argv)

    component_loggers = (geometry.logger, classify.logger, config_module.logger, logger)
    saved_levels = [component_logger.logger.level for component_logger in component_loggers]
    try:
        return _run(args, component_loggers)
    finally:
        for component_logger, level in zip(component_loggers, saved_levels):
            component_logger.set_level(level)


def _run(args: argparse.Namespace, component_loggers) -> int:
    try:
        config = CodecConfig.from_yaml(args.config) if args.config else CodecConfig()
        for component_logger in component_loggers:
            component_logger.set_level(config.logging_level)

        records = load_records(args.records)
        geoms = [SdoGeometry.from_dict(record, config=config) for record in records]
    except (OSError, ValueError, TypeError, KeyError, OverflowError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.compare:
        if len(geoms) != 2:
            print(f"Error: --compare needs exactly 2 records, got {len(geoms)}", file=sys.stderr)
            return 1
        equal = geoms[0] == geoms[1]
        print("equal" if equal else "not equal")
        return 0 if equal else 1

    for geom in geoms:
        for line in describe(geom):
            print(line)
        logger.info(
            event=LogEvent.INSPECT_RENDERED,
            message="Rendered geometry record",
            metadata={'gtype': geom.gtype, 'num_elements': geom.num_elements()},
        )
    return 0


if __name__ == '__main__':
    sys.exit(main())

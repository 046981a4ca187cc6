"""
sdo-inspect - Command-line inspection of SDO_GEOMETRY records.

Reads geometry records (gtype, srid, point, elem_info, ordinates) from a
YAML or JSON file and prints their diagnostic rendering and element table.

Usage:
    sdo-inspect records.yaml
    sdo-inspect --config codec.yaml records.yaml
    sdo-inspect --compare pair.yaml
"""

__version__ = "1.0.0"

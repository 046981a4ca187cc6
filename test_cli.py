"""
Tests for the sdo-inspect CLI.
"""

import pytest

from sdo_cli.cli import describe, load_records, main
from sdo_geom import SdoGeometry

RECORDS = """\
geometries:
  - gtype: 2003
    srid: 4326
    elem_info: [1, 1003, 1, 9, 2003, 1]
    ordinates: [0, 0, 10, 0, 10, 10, 0, 0, 2, 2, 4, 2, 4, 4, 2, 2]
  - gtype: 2001
    point: [1.0, 2.0, .nan]
"""

PAIR = """\
- gtype: 3302
  srid: 4326
  elem_info: [1, 2, 1]
  ordinates: [0, 0, .nan, 5, 5, 10]
- gtype: 3302
  elem_info: [1, 2, 1]
  ordinates: [0, 0, .nan, 5, 5, 10]
"""


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "records.yaml"
    path.write_text(RECORDS)
    return path


def test_load_records(records_file):
    records = load_records(str(records_file))
    assert len(records) == 2
    assert records[0]['gtype'] == 2003


def test_load_single_record(tmp_path):
    path = tmp_path / "one.yaml"
    path.write_text("gtype: 2001\npoint: [1, 2, 0]\n")
    assert load_records(str(path)) == [{'gtype': 2001, 'point': [1, 2, 0]}]


def test_load_records_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(str(tmp_path / "missing.yaml"))

    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    with pytest.raises(ValueError):
        load_records(str(empty))


def test_describe_lists_elements():
    geom = SdoGeometry(
        gtype=2003,
        elem_info=[1, 1003, 1, 9, 2003, 3],
        ordinates=[0, 0, 10, 0, 10, 10, 0, 0, 2, 2, 4, 4],
    )
    lines = describe(geom)
    assert lines[0] == str(geom)
    assert "type=POLYGON" in lines[1]
    assert lines[2] == "  [0] offset=1 etype=POLYGON_EXTERIOR interpretation=STRAIGHT ordinates=8"
    assert lines[3] == "  [1] offset=9 etype=POLYGON_INTERIOR interpretation=RECTANGLE ordinates=4"


def test_describe_unknown_codes():
    geom = SdoGeometry(gtype=2009, elem_info=[1, 77, 9], ordinates=[0, 0])
    lines = describe(geom)
    assert "type=9" in lines[1]
    assert "etype=77 interpretation=9" in lines[2]


def test_main_renders_records(records_file, capsys):
    assert main([str(records_file)]) == 0
    out = capsys.readouterr().out
    assert "GTYPE=2003 SRID=4326 ELEM_INFO=1,1003,1,  9,2003,1" in out
    assert "compact_point=True" in out


def test_main_compare_equal(tmp_path, capsys):
    path = tmp_path / "pair.yaml"
    path.write_text(PAIR)
    assert main(["--compare", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "equal"


def test_main_compare_needs_two_records(records_file, tmp_path, capsys):
    path = tmp_path / "one.yaml"
    path.write_text("gtype: 2001\npoint: [1, 2, 0]\n")
    assert main(["--compare", str(path)]) == 1


def test_main_strict_config(tmp_path, capsys):
    records = tmp_path / "bad.yaml"
    records.write_text("gtype: 2002\nelem_info: [1, 2, 1, 5]\nordinates: [0, 0, 1, 1]\n")
    config = tmp_path / "codec.yaml"
    config.write_text("strict_elem_info: true\n")

    assert main([str(records)]) == 0
    assert main(["--config", str(config), str(records)]) == 1
    assert "multiple of 3" in capsys.readouterr().err


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.yaml")]) == 1


def test_main_out_of_range_elem_info(tmp_path, capsys):
    records = tmp_path / "overflow.yaml"
    records.write_text("gtype: 2002\nelem_info: [1, 2, 3000000000]\nordinates: [0, 0, 1, 1]\n")
    assert main([str(records)]) == 1
    assert "32-bit" in capsys.readouterr().err


def test_main_null_srid(tmp_path, capsys):
    records = tmp_path / "null_srid.yaml"
    records.write_text("gtype: 2001\nsrid: null\npoint: [1, 2, 0]\n")
    assert main([str(records)]) == 0
    assert "GTYPE=2001 SRID=-1" in capsys.readouterr().out


def test_main_restores_logger_levels(tmp_path, records_file):
    from sdo_geom import classify, config as config_module, geometry

    loggers = (geometry.logger, classify.logger, config_module.logger)
    before = [lg.logger.level for lg in loggers]

    config = tmp_path / "quiet.yaml"
    config.write_text("log_level: ERROR\n")
    assert main(["--config", str(config), str(records_file)]) == 0

    assert [lg.logger.level for lg in loggers] == before

import pytest

from motobridge.calibration import (
    CalibrationData,
    CalibrationParseError,
    CalibrationStore,
    parse_calibration,
)


def _record(number, mgroup="1,0,0,0", sgroup="0,1,0,0", srang="1000.5,-200.25,30.0,90.0,-45.5,0.5"):
    return "\n".join(
        [
            f"//RBCALIB {number}",
            "//MTOOL 0",
            f"//MGROUP {mgroup}",
            "//MPULSE",
            "//MRBC1 0,0,0",
            "//MRBC2 0,0,0",
            "//MRBC3 0,0,0",
            "//STOOL 0",
            f"//SGROUP {sgroup}",
            "//SPULSE",
            "//SSTC1 0,0,0",
            "//SSTC2 0,0,0",
            "//SSTC3 0,0,0",
            f"//SRANG {srang}",
        ]
    )


def test_single_record_parsed():
    files = parse_calibration(_record(1))
    assert list(files) == [0]
    data = files[0]
    assert data.master_group == 0
    assert data.slave_group == 1
    assert data.pos_uow == (1000500, -200250, 30000)
    assert data.ang_uow == (900000, -455000, 5000)


def test_multiple_records_keyed_zero_based():
    text = _record(1) + "\n" + _record(3, mgroup="0,0,1", sgroup="0,0,0,1")
    files = parse_calibration(text)
    assert sorted(files) == [0, 2]
    assert files[2].master_group == 2
    assert files[2].slave_group == 3


def test_empty_text_gives_no_records():
    assert parse_calibration("") == {}


def test_parsing_stops_at_non_record_line():
    text = "something else\n" + _record(1)
    assert parse_calibration(text) == {}


def test_trailing_garbage_after_record_is_ignored():
    files = parse_calibration(_record(2) + "\n//END")
    assert list(files) == [1]


def test_no_flagged_group_gives_none():
    files = parse_calibration(_record(1, mgroup="0,0,0"))
    assert files[0].master_group is None


def test_short_srang_raises():
    with pytest.raises(CalibrationParseError):
        parse_calibration(_record(1, srang="1,2,3"))


def test_bad_srang_number_raises():
    with pytest.raises(CalibrationParseError):
        parse_calibration(_record(1, srang="a,b,c,d,e,f"))


def test_truncated_record_raises():
    text = "\n".join(_record(1).splitlines()[:5])
    with pytest.raises(CalibrationParseError):
        parse_calibration(text)


def test_missing_group_field_raises():
    text = _record(1).replace("//MGROUP 1,0,0,0", "//MGROUP")
    with pytest.raises(CalibrationParseError):
        parse_calibration(text)


def test_invalid_file_number_raises():
    with pytest.raises(CalibrationParseError):
        parse_calibration(_record(0))


def test_store_lookup():
    store = CalibrationStore.from_text(_record(1))
    assert store.get(0) == parse_calibration(_record(1))[0]
    with pytest.raises(KeyError):
        store.get(1)


def test_store_from_mapping():
    data = CalibrationData(0, 1, (1, 2, 3), (4, 5, 6))
    store = CalibrationStore({4: data})
    assert store.get(4) is data
import dataclasses

import pytest

from xiangqi_engine.moverecord import MoveRecord


def test_default_record_is_empty():
    record = MoveRecord()
    assert (
        record.move_id,
        record.from_row,
        record.from_col,
        record.to_row,
        record.to_col,
        record.kill_id,
        record.was_dead,
    ) == (-1, -1, -1, -1, -1, -1, False)


def test_describe_matches_fixed_format():
    record = MoveRecord(9, 2, 1, 9, 1, 25, False)
    assert record.describe() == (
        "MoveRecord: ID=9, From=(1,2), To=(1,9), KillID=25, WasDead=false"
    )


def test_describe_reports_was_dead_true():
    record = MoveRecord(0, 0, 0, 1, 0, -1, True)
    assert record.describe().endswith("WasDead=true")
    assert str(record) == record.describe()


def test_equality_compares_all_fields():
    a = MoveRecord(1, 0, 1, 2, 2, -1, False)
    b = MoveRecord(1, 0, 1, 2, 2, -1, False)
    c = MoveRecord(1, 0, 1, 2, 2, -1, True)
    assert a == b
    assert not (a == c)


def test_copy_is_equal():
    original = MoveRecord(3, 0, 3, 1, 4, 20, False)
    copy = dataclasses.replace(original)
    assert copy == original


def test_record_is_immutable():
    record = MoveRecord(1, 0, 0, 1, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.move_id = 2
    assert record.move_id == 1
    assert record == MoveRecord(1, 0, 0, 1, 0)
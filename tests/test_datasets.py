import numpy as np
import pytest

from lsqcalc.datasets import SampleWorkbook


def test_workbook_starts_with_one_empty_dataset():
    wb = SampleWorkbook()
    assert len(wb) == 1
    assert wb.active.name == "Values 1"
    assert wb.summary().n == 0


def test_add_dataset_numbers_and_selects_it():
    wb = SampleWorkbook()
    second = wb.add_dataset()
    assert second.name == "Values 2"
    assert wb.active_index == 1
    assert wb.add_dataset().name == "Values 3"


def test_values_are_isolated_per_dataset():
    wb = SampleWorkbook()
    for v in [2, 4, 4, 4, 5, 5, 7, 9]:
        wb.add_value(v)
    first = wb.datasets[0]

    wb.add_dataset()
    wb.add_value(10.0)
    wb.select(0)
    assert wb.datasets[0] is first
    summaries = wb.summaries()
    assert summaries[0].n == 8
    assert np.isclose(summaries[0].mean, 5.0)
    assert summaries[1].n == 1
    assert summaries[1].sample_std_dev is None


def test_edit_and_delete_values():
    wb = SampleWorkbook()
    a = wb.add_value(1.0)
    b = wb.add_value(3.0)
    wb.update_value(a.id, 5.0)
    assert wb.summary().mean == 4.0
    assert wb.update_value("missing", 1.0) is None

    assert wb.delete_value(a.id)
    assert wb.delete_value(b.id)
    assert not wb.delete_value(b.id)
    assert len(wb) == 1
    assert wb.active.values == ()


def test_submit_value_parses_text():
    wb = SampleWorkbook()
    assert wb.submit_value("") is None
    assert wb.submit_value("abc") is None
    item = wb.submit_value(" 2.5 ")
    assert item.v == 2.5
    assert wb.submit_value("7", value_id=item.id).v == 7.0
    assert [x.v for x in wb.active.values] == [7.0]


def test_reset_active_and_reset_all():
    wb = SampleWorkbook()
    wb.add_value(1.0)
    wb.add_dataset()
    wb.add_value(2.0)
    wb.reset_active()
    assert wb.active.values == ()
    assert wb.datasets[0].values[0].v == 1.0

    wb.reset_all()
    assert len(wb) == 1
    assert wb.active_index == 0
    assert wb.active.name == "Values 1"


def test_select_out_of_range():
    with pytest.raises(IndexError):
        SampleWorkbook().select(3)

from vvc_structure.exceptions import (
    Status,
    SinkWriteError,
    CorruptStructureError,
    ScopeOrderError,
)


def test_status_values():
    assert Status.ok == 0
    assert Status.err_initialize == -2
    assert Status.err_parameter == -7


def test_sink_write_error():
    e = SinkWriteError(IOError("broken pipe"))
    assert str(e) == "Writing to the output sink failed: broken pipe"
    assert "should be discarded" in e.explain()


def test_corrupt_structure_error():
    e = CorruptStructureError("CTU 3", "num_cus", 5, 2)
    assert str(e) == "CTU 3 claims num_cus = 5 but only 2 entries are present."
    assert e.what == "CTU 3"
    assert e.field == "num_cus"
    assert e.expected == 5
    assert e.actual == 2


def test_scope_order_error():
    e = ScopeOrderError("Bad order.")
    assert str(e) == "Bad order."
    assert e.explain() == "Bad order."

"""Error handling tests."""

from io import BytesIO, StringIO

import pytest

from pymapper2sql import restore_sql
from pymapper2sql._errors import (
    MarkupError,
    RestoreError,
    SinkWriteError,
    UnsupportedDirectiveError,
)
from pymapper2sql.nodes import (
    ChooseNode,
    ForeachNode,
    IfNode,
    PlaceholderNode,
    SetNode,
    TextNode,
    TrimNode,
    WhenNode,
    WhereNode,
)


class TestRestoreErrorBase:
    def test_str_returns_user_message(self):
        err = RestoreError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = RestoreError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        assert RestoreError("same message").internal() == "same message"

    def test_wrapped_exception(self):
        cause = OSError("root cause")
        err = RestoreError("user msg", wrapped=cause)
        assert err.wrapped is cause

    @pytest.mark.parametrize(
        "cls", [SinkWriteError, UnsupportedDirectiveError, MarkupError]
    )
    def test_subclasses(self, cls):
        assert issubclass(cls, RestoreError)


class TestSinkWriteFailure:
    def test_text_write_failure(self, failing_sink):
        sink = failing_sink()
        with pytest.raises(SinkWriteError) as excinfo:
            TextNode("SELECT 1").restore(sink)
        assert excinfo.value.wrapped is sink.error
        assert excinfo.value.__cause__ is sink.error
        assert str(excinfo.value) == "failed to write restored SQL"
        assert "no space left" in excinfo.value.internal()

    def test_propagates_from_child_unchanged(self, build, failing_sink):
        sink = failing_sink(fail_after=1)
        with pytest.raises(SinkWriteError) as excinfo:
            build(IfNode(), "a = 1").restore(sink)
        assert sink.written == [" "]
        assert excinfo.value.wrapped is sink.error

    def test_propagates_through_nesting(self, build, failing_sink):
        tree = build(
            ChooseNode(),
            build(WhenNode("a"), build(IfNode("b"), PlaceholderNode("c"))),
        )
        sink = failing_sink(fail_after=3)
        with pytest.raises(SinkWriteError):
            tree.restore(sink)
        assert sink.written == [" ", "  ", " "]

    @pytest.mark.parametrize(
        "node_type", [TrimNode, WhereNode, SetNode], ids=["trim", "where", "set"]
    )
    def test_trim_failure_at_sink(self, node_type, build, failing_sink):
        node = build(node_type(), "a = 1")
        with pytest.raises(SinkWriteError):
            node.restore(failing_sink())

    def test_empty_trim_never_writes(self, build, failing_sink):
        node = build(WhereNode(), IfNode("a"), "  ")
        node.restore(failing_sink())

    def test_foreach_failure(self, build, failing_sink):
        node = build(ForeachNode(open="(", close=")"), PlaceholderNode("id"))
        sink = failing_sink(fail_after=2)
        with pytest.raises(SinkWriteError):
            node.restore(sink)
        assert sink.written == [" ", "("]

    def test_closed_stream(self):
        w = StringIO()
        w.close()
        with pytest.raises(SinkWriteError) as excinfo:
            TextNode("x").restore(w)
        assert isinstance(excinfo.value.wrapped, ValueError)

    def test_other_exceptions_not_wrapped(self, build):
        class BrokenSink:
            def write(self, s):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            build(IfNode(), "x").restore(BrokenSink())

    def test_binary_sink_is_not_a_sink_failure(self):
        with pytest.raises(TypeError):
            TextNode("x").restore(BytesIO())


def test_restore_sql_uses_fresh_buffer(build):
    node = build(SetNode(), "a = 1,")
    assert restore_sql(node) == restore_sql(node) == "SET a = 1"

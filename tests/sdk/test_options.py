from hostclient import (
    ResponseTarget,
    with_body,
    with_file,
    with_header,
    with_param,
    with_response,
)
from hostclient._utils import FileAttachment, fold_options


class TestOptions:
    def test_empty_fold(self):
        call = fold_options([])

        assert call.request.body is None
        assert call.request.params == {}
        assert call.request.header == {}
        assert call.request.file is None
        assert call.response is None

    def test_disjoint_keys_commute(self):
        options = [
            with_header("X-A", "1"),
            with_header("X-B", "2"),
            with_param("a", "1"),
            with_param("b", "2"),
        ]

        forward = fold_options(options)
        backward = fold_options(reversed(options))

        assert forward.request.header == backward.request.header
        assert forward.request.params == backward.request.params

    def test_header_last_write_wins(self):
        call = fold_options([with_header("X-A", "first"), with_header("X-A", "last")])

        assert call.request.header == {"X-A": "last"}

    def test_param_last_write_wins(self):
        call = fold_options([with_param("id", "1"), with_param("id", "2")])

        assert call.request.params == {"id": "2"}

    def test_body_replaced_wholesale(self):
        call = fold_options([with_body(b"first"), with_body(b"2")])

        assert call.request.body == b"2"

    def test_file_replaces_previous_file(self):
        call = fold_options(
            [with_file("a.txt", b"a"), with_file("b.txt", b"b")]
        )

        assert call.request.file == FileAttachment(name="b.txt", data=b"b")

    def test_file_and_body_both_recorded(self):
        call = fold_options([with_body(b"body"), with_file("x.png", b"\x01")])

        assert call.request.body == b"body"
        assert call.request.file == FileAttachment(name="x.png", data=b"\x01")

    def test_response_target_bound(self):
        target: ResponseTarget[dict] = ResponseTarget(dict)

        call = fold_options([with_response(target)])

        assert call.response is target

    def test_options_are_independent_per_fold(self):
        option = with_header("X-A", "1")

        first = fold_options([option])
        second = fold_options([])

        assert first.request.header == {"X-A": "1"}
        assert second.request.header == {}

import pytest

from reuse_architect.core.application.parsing.result_recovery import (
    recover_generated_result,
    strip_code_fences,
)
from reuse_architect.core.domain.entities.generated_result import GeneratedResult
from reuse_architect.core.domain.exceptions import MALFORMED_RESULT_HINT, MalformedResultError


def test_strict_json_is_parsed_with_every_field(result_json):
    result = recover_generated_result(result_json)

    assert result.analysis.startswith("Tái sử dụng")
    assert result.reused_snippets == ["auth_utils", "db_connection"]
    assert result.file_tree[0].is_folder
    assert result.file_tree[0].children[1].is_reused is True
    assert result.documentation
    assert [p.name for p in result.diagram_data] == ["Reuse", "New Code"]


def test_sparse_json_still_exposes_all_fields():
    result = recover_generated_result('{"analysis": "only this"}')

    assert result.analysis == "only this"
    assert result.reused_snippets == []
    assert result.file_tree == []
    assert result.documentation == ""
    assert result.diagram_data == []


def test_fenced_response_matches_unfenced(result_json):
    fenced = f"```json\n{result_json}\n```"

    assert recover_generated_result(fenced) == recover_generated_result(result_json)


def test_fence_stripping_example():
    raw = (
        '```json\n{"analysis":"x","reusedSnippets":[],"fileTree":[],'
        '"documentation":"y","diagramData":[]}\n```'
    )

    result = recover_generated_result(raw)

    assert result == GeneratedResult(analysis="x", documentation="y")
    assert result.to_wire() == {
        "analysis": "x",
        "reusedSnippets": [],
        "fileTree": [],
        "documentation": "y",
        "diagramData": [],
    }


def test_strip_code_fences_is_idempotent():
    raw = "  ```json\n{\"a\": 1}\n```  "

    once = strip_code_fences(raw)

    assert once == '{"a": 1}'
    assert strip_code_fences(once) == once


@pytest.mark.parametrize(
    "raw",
    [
        "Xin lỗi, tôi không thể trả lời.",
        '{"analysis": "cut off", "fileTree": [{"name": "src"',
        '```json\n{"analysis": "x", \n```',
        "[]",
    ],
)
def test_unrecoverable_answers_raise_malformed_error(raw):
    with pytest.raises(MalformedResultError) as exc:
        recover_generated_result(raw)

    assert str(exc.value) == MALFORMED_RESULT_HINT
    assert exc.value.raw_tail == raw[-100:]


def test_raw_tail_is_limited_to_last_hundred_chars():
    raw = "x" * 250

    with pytest.raises(MalformedResultError) as exc:
        recover_generated_result(raw)

    assert len(exc.value.raw_tail) == 100

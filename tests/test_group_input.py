import json

import pytest

from bursts.group_input import build_request, build_student, main
from bursts.models import to_json
from bursts.utils import parse_line

SAMPLE_ROW = "x,7,x,42,K,g,1,2,3,4,5,6,10,20,30"


def test_build_student_maps_every_field():
    student = build_student(parse_line(SAMPLE_ROW))

    assert student.sid == 42
    assert student.classe_sid == 7
    assert student.grade_sid == 2
    assert student.last_support_rec_type_sid == 3
    assert [(s.measure, s.score) for s in student.scores] == [(3, 10), (4, 20), (5, 30)]
    assert [(s.sid, s.last_level, s.best_level) for s in student.skills] == [
        (1, 1, 2),
        (2, 3, 4),
        (3, 5, 6),
    ]


@pytest.mark.parametrize("code, expected", [
    ("K", 2), ("1", 3), ("2", 4), ("3", 5), ("4", None), ("k", None), ("", None),
])
def test_grade_codes(code, expected):
    row = parse_line(f"x,7,x,42,{code},g,1,2,3,4,5,6,10,20,30")
    assert build_student(row).grade_sid == expected


@pytest.mark.parametrize("code, expected", [
    ("r", 1), ("y", 2), ("g", 3), ("R", None), ("b", None),
])
def test_recommendation_codes(code, expected):
    row = parse_line(f"x,7,x,42,K,{code},1,2,3,4,5,6,10,20,30")
    assert build_student(row).last_support_rec_type_sid == expected


def test_short_row_coerces_missing_fields():
    student = build_student(parse_line("x,7,x,42"))

    assert student.grade_sid is None
    assert student.last_support_rec_type_sid is None
    assert [s.score for s in student.scores] == [0, 0, 0]
    assert all(s.last_level == 0 and s.best_level == 0 for s in student.skills)


def test_non_numeric_fields_become_zero():
    student = build_student(parse_line("x,abc,x,42,K,g,n/a,2,3,4,5,6,,20,30"))

    assert student.classe_sid == 0
    assert student.skills[0].last_level == 0
    assert student.scores[0].score == 0


def test_build_request_keeps_row_order():
    rows = [parse_line(f"x,7,x,{sid},K,g,1,2,3,4,5,6,10,20,30") for sid in (5, 3, 9)]

    request = build_request(rows)

    assert [s.sid for s in request.students] == [5, 3, 9]


def test_empty_input_yields_constants_only():
    document = json.loads(to_json(build_request([])))

    assert document == {
        "maxStudentsPerGroups": 5,
        "maxNbOfGroups": 3,
        "forceUnderperfStudentsIntoGroups": False,
        "students": [],
    }


def test_unmapped_codes_serialize_as_null():
    row = parse_line("x,7,x,42,Z,q,1,2,3,4,5,6,10,20,30")
    document = json.loads(to_json(build_request([row])))

    student = document["students"][0]
    assert student["gradeSid"] is None
    assert student["lastSupportRecTypeSid"] is None


def test_main_writes_pretty_request(write_csv, capsys):
    path = write_csv("assessments.csv", [SAMPLE_ROW, "", "x,8,x,43,1,r,0,0,0,0,0,0,1,2,3"])

    assert main([str(path)]) == 0

    out = capsys.readouterr().out
    assert out.startswith('{\n  "maxStudentsPerGroups": 5')
    document = json.loads(out)
    assert len(document["students"]) == 2
    assert list(document["students"][0]) == [
        "sid", "classeSid", "gradeSid", "lastSupportRecTypeSid", "scores", "skills",
    ]
    assert document["students"][0]["scores"][0] == {"measure": 3, "score": 10}
    assert document["students"][0]["skills"][0] == {"sid": 1, "lastLevel": 1, "bestLevel": 2}
    assert document["students"][1]["gradeSid"] == 3


def test_main_fails_on_missing_file(tmp_path, capsys):
    with pytest.raises(OSError):
        main([str(tmp_path / "missing.csv")])

    assert capsys.readouterr().out == ""


def test_main_accepts_lowercase_log_level(write_csv, capsys):
    path = write_csv("assessments.csv", [SAMPLE_ROW])

    assert main(["--log-level", "debug", str(path)]) == 0

    assert len(json.loads(capsys.readouterr().out)["students"]) == 1


def test_main_rejects_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "foo"])

    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err

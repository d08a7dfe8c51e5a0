import pytest

from bursts.config import GRADE_MAP, INST_REC_MAP, SKILL_SIDS, Settings


def test_code_tables_are_read_only():
    with pytest.raises(TypeError):
        GRADE_MAP["4"] = 6
    with pytest.raises(TypeError):
        INST_REC_MAP["b"] = 4


def test_skill_catalogue():
    assert SKILL_SIDS["phonological_awareness"] == 1
    assert SKILL_SIDS["reading_fluency"] == 8
    assert len(SKILL_SIDS) == 8


def test_settings_to_dict():
    settings = Settings.to_dict()

    assert settings["max_students_per_group"] == 5
    assert settings["max_nb_of_groups"] == 3
    assert settings["force_underperf_students_into_groups"] is False
    assert settings["measures"] == [3, 4, 5]
    assert settings["grade_map"] == {"K": 2, "1": 3, "2": 4, "3": 5}

import pytest
from pydantic import ValidationError
from math_dungeon.math import Problem, ProblemType, option_key

def options(*values):
    return [{"label": "ABCD"[i], "value": v} for i, v in enumerate(values)]

def test_fill_in_blank_defaults():
    problem = Problem(question="2 + 2 = ?", answer=4, topic="Addition", difficulty=1)
    assert problem.type == ProblemType.FILL_IN_BLANK
    assert not problem.is_multiple_choice
    assert problem.option_values() == []

def test_id_is_stable_hash_of_topic_and_question():
    a = Problem(question="2 + 2 = ?", answer=4, topic="Addition", difficulty=1)
    b = Problem(question="2 + 2 = ?", answer=4, topic="Addition", difficulty=3)
    c = Problem(question="2 + 3 = ?", answer=5, topic="Addition", difficulty=1)

    assert a.id == b.id
    assert a.id != c.id
    assert len(a.id) == 12
    assert "id" in a.model_dump()

def test_multiple_choice_needs_answer_once():
    with pytest.raises(ValidationError):
        Problem(question="?", answer=4, topic="T", difficulty=1,
                type=ProblemType.MULTIPLE_CHOICE, options=options(1, 2, 3))

def test_multiple_choice_rejects_duplicates():
    with pytest.raises(ValidationError):
        Problem(question="?", answer=4, topic="T", difficulty=1,
                type=ProblemType.MULTIPLE_CHOICE, options=options(4, 4.0, 3))

def test_multiple_choice_option_count():
    with pytest.raises(ValidationError):
        Problem(question="?", answer=1, topic="T", difficulty=1,
                type=ProblemType.MULTIPLE_CHOICE, options=options(1))
    with pytest.raises(ValidationError):
        Problem(question="?", answer=1, topic="T", difficulty=1,
                type=ProblemType.MULTIPLE_CHOICE,
                options=[{"label": str(i), "value": i} for i in range(1, 6)])

def test_fill_in_blank_rejects_options():
    with pytest.raises(ValidationError):
        Problem(question="?", answer=1, topic="T", difficulty=1, options=options(1, 2))

def test_difficulty_range():
    with pytest.raises(ValidationError):
        Problem(question="?", answer=1, topic="T", difficulty=31)

def test_option_key():
    assert option_key(12) == option_key(12.0)
    assert option_key(" Circle ") == option_key("circle")
    assert option_key("12") != option_key(12)
    assert option_key(True) == ("text", "true")

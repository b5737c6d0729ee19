from uuid import uuid4

import pytest

from quizhub.services.scoring import (
    ChoiceAnswer,
    ConfigurationError,
    DuplicateAnswerError,
    MatchingAnswer,
    MultipleChoiceAnswer,
    Question,
    QuestionType,
    ScoringConfig,
    round_half_up,
    scale_score,
    score_quiz,
)


@pytest.fixture
def questions():
    return [
        Question(id="q1", type=QuestionType.SINGLE_CHOICE, options=["A", "B", "C"], correct_answers=["B"], points=2, order=0),
        Question(id="q2", type=QuestionType.MULTIPLE_CHOICE, options=["A", "B", "C", "D"], correct_answers=["A", "C"], points=4, order=1),
        Question(id="q3", type=QuestionType.MATCHING, options=["X", "Y"], correct_answers=["1", "2"], points=3, order=2),
        Question(id="q4", type=QuestionType.TRUE_FALSE, options=["True", "False"], correct_answers=["True"], points=1, order=3),
    ]


def perfect_answers():
    return [
        ChoiceAnswer(question_id="q1", question_type="SINGLE_CHOICE", selected_answer="B"),
        MultipleChoiceAnswer(question_id="q2", question_type="MULTIPLE_CHOICE", selected_answers={"A", "C"}),
        MatchingAnswer(question_id="q3", question_type="MATCHING", matching_pairs={"X": "1", "Y": "2"}),
        ChoiceAnswer(question_id="q4", question_type="TRUE_FALSE", selected_answer="True"),
    ]


def test_perfect_submission_scores_full_scale(questions):
    result = score_quiz(questions, perfect_answers())

    assert result.score == 10
    assert result.correct_answers == 4
    assert result.total_questions == 4
    assert result.total_points == 10
    assert result.max_possible_points == 10
    assert result.passed


def test_partial_submission(questions):
    answers = [
        ChoiceAnswer(question_id="q1", question_type="SINGLE_CHOICE", selected_answer="B"),
        MultipleChoiceAnswer(question_id="q2", question_type="MULTIPLE_CHOICE", selected_answers={"A"}),
        MatchingAnswer(question_id="q3", question_type="MATCHING", matching_pairs={"X": "1", "Y": "9"}),
    ]
    result = score_quiz(questions, answers)

    # 2 + 4 * 0.5 + 3 * 0.5 + 0
    assert result.total_points == pytest.approx(5.5)
    assert result.max_possible_points == 10
    assert result.score == 5.5
    assert result.correct_answers == 1
    assert not result.passed


def test_only_two_point_question_correct():
    questions = [
        Question(id=1, type=QuestionType.SINGLE_CHOICE, options=["A", "B"], correct_answers=["A"], points=2),
        Question(id=2, type=QuestionType.SINGLE_CHOICE, options=["A", "B"], correct_answers=["B"], points=3, order=1),
    ]
    answers = [
        ChoiceAnswer(question_id=1, question_type="SINGLE_CHOICE", selected_answer="A"),
        ChoiceAnswer(question_id=2, question_type="SINGLE_CHOICE", selected_answer="A"),
    ]
    result = score_quiz(questions, answers)

    assert result.total_points == 2
    assert result.max_possible_points == 5
    assert result.score == 4.0


def test_empty_quiz_scores_zero():
    result = score_quiz([], [])

    assert result.score == 0
    assert result.max_possible_points == 0
    assert result.total_questions == 0
    assert result.breakdown == []


def test_scoring_is_deterministic(questions):
    answers = perfect_answers()[:2]
    assert score_quiz(questions, answers) == score_quiz(questions, answers)


def test_answers_for_unknown_questions_are_ignored(questions):
    answers = perfect_answers()[:2]
    extra = ChoiceAnswer(question_id="elsewhere", question_type="SINGLE_CHOICE", selected_answer="B")

    with_extra = score_quiz(questions, answers + [extra])
    without = score_quiz(questions, answers)

    assert with_extra.score == without.score
    assert with_extra.total_points == without.total_points


def test_repeated_answers_for_unknown_questions_are_ignored(questions):
    answers = perfect_answers()[:2]
    stray = ChoiceAnswer(question_id="elsewhere", question_type="SINGLE_CHOICE", selected_answer="A")

    with_stray = score_quiz(questions, answers + [stray, stray])

    assert with_stray == score_quiz(questions, answers)


def test_answer_order_does_not_matter(questions):
    answers = perfect_answers()
    assert score_quiz(questions, answers).score == score_quiz(questions, list(reversed(answers))).score


def test_breakdown_follows_question_order(questions):
    shuffled = [questions[2], questions[0], questions[3], questions[1]]
    result = score_quiz(shuffled, [])

    assert [outcome.question_id for outcome in result.breakdown] == ["q1", "q2", "q3", "q4"]
    assert all(outcome.partial_score == 0 and outcome.answer is None for outcome in result.breakdown)


def test_breakdown_carries_earned_points(questions):
    answers = [MatchingAnswer(question_id="q3", question_type="MATCHING", matching_pairs={"X": "1"})]
    outcome = score_quiz(questions, answers).breakdown[2]

    assert outcome.question.id == "q3"
    assert outcome.points == 3
    assert outcome.earned_points == pytest.approx(1.5)
    assert outcome.answer.matching_pairs == {"X": "1"}


def test_duplicate_answers_are_rejected(questions):
    answers = [
        ChoiceAnswer(question_id="q1", question_type="SINGLE_CHOICE", selected_answer="B"),
        ChoiceAnswer(question_id="q1", question_type="SINGLE_CHOICE", selected_answer="A"),
    ]
    with pytest.raises(DuplicateAnswerError) as excinfo:
        score_quiz(questions, answers)
    assert excinfo.value.question_id == "q1"


def test_misconfigured_question_aborts_the_quiz(questions):
    broken = Question(id="q5", type=QuestionType.MATCHING, options=["X", "Y"], correct_answers=["1"], order=4)
    with pytest.raises(ConfigurationError):
        score_quiz(questions + [broken], perfect_answers())


def test_uuid_question_ids():
    question_id = uuid4()
    question = Question(id=question_id, type=QuestionType.TRUE_FALSE, options=["True", "False"], correct_answers=["False"])
    answer = ChoiceAnswer(question_id=question_id, question_type="TRUE_FALSE", selected_answer="False")

    assert score_quiz([question], [answer]).score == 10


@pytest.mark.parametrize(
    "passing_score, passed",
    [(None, False), (5.5, True), (5.0, True), (7.0, False)],
)
def test_passing_threshold(questions, passing_score, passed):
    answers = [
        ChoiceAnswer(question_id="q1", question_type="SINGLE_CHOICE", selected_answer="B"),
        MultipleChoiceAnswer(question_id="q2", question_type="MULTIPLE_CHOICE", selected_answers={"A"}),
        MatchingAnswer(question_id="q3", question_type="MATCHING", matching_pairs={"X": "1"}),
    ]
    assert score_quiz(questions, answers, passing_score=passing_score).passed is passed


def test_custom_scale():
    config = ScoringConfig(scale=100, precision=0)
    question = Question(id=1, type=QuestionType.MULTIPLE_CHOICE, options=["A", "B", "C"], correct_answers=["A", "B", "C"])
    answer = MultipleChoiceAnswer(question_id=1, question_type="MULTIPLE_CHOICE", selected_answers={"A"})

    assert score_quiz([question], [answer], config).score == 33


@pytest.mark.parametrize(
    "value, expected",
    [(4.25, 4.3), (4.35, 4.4), (6.66666, 6.7), (0.05, 0.1), (9.94, 9.9)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value, 1) == expected


def test_scale_score_guards_empty_quiz():
    assert scale_score(0, 0) == 0


def test_scale_score_never_exceeds_scale():
    assert scale_score(10.0000001, 10) == 10


def test_exact_halves_round_up_despite_float_noise():
    # 0.6 of 24 points on a scale of 10 is exactly 0.25
    assert scale_score(0.6, 24) == 0.3
    assert round_half_up(0.24999999999999997, 1) == 0.3

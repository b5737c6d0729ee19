import pytest

from conftest import auth_headers, quiz_payload
from quizhub.models.user_db.user_db import UserRole


@pytest.fixture
def submitted(client, student, published_quiz):
    questions = {q["type"]: q for q in published_quiz["questions"]}
    answers = [
        {"question_id": questions["TRUE_FALSE"]["id"], "question_type": "TRUE_FALSE", "selected_answer": "True"},
        {"question_id": questions["SINGLE_CHOICE"]["id"], "question_type": "SINGLE_CHOICE", "selected_answer": "Rome"},
        {
            "question_id": questions["MULTIPLE_CHOICE"]["id"],
            "question_type": "MULTIPLE_CHOICE",
            "selected_answers": ["Sweden", "Norway"],
        },
    ]
    response = client.post(
        f"/quizzes/{published_quiz['id']}/submit", json={"answers": answers}, headers=auth_headers(student)
    )
    assert response.status_code == 200, response.text
    return response.json()["result"]


def test_result_details(client, student, submitted):
    response = client.get(f"/results/{submitted['id']}", headers=auth_headers(student))

    assert response.status_code == 200
    assert response.json()["score"] == 6.0
    assert response.json()["user"]["username"] == "student"
    assert response.json()["quiz"]["title"] == "Capitals"


def test_submitted_answers_follow_question_order(client, student, submitted):
    response = client.get(f"/results/{submitted['id']}/answers", headers=auth_headers(student))

    assert response.status_code == 200
    answers = response.json()
    assert [a["question_type"] for a in answers] == ["SINGLE_CHOICE", "MULTIPLE_CHOICE", "TRUE_FALSE"]
    assert answers[0]["selected_answer"] == "Rome"
    assert answers[0]["is_correct"] is False
    assert answers[0]["question"]["correct_answers"] == ["Paris"]
    assert answers[1]["selected_answers"] == ["Norway", "Sweden"]
    assert answers[1]["partial_score"] == 1


def test_students_only_see_their_own_results(client, make_user, submitted):
    other = make_user("other_student")

    assert client.get(f"/results/{submitted['id']}", headers=auth_headers(other)).status_code == 403
    assert client.get(f"/results/user/{submitted['user_id']}", headers=auth_headers(other)).status_code == 403


def test_results_for_user_and_quiz(client, student, submitted):
    response = client.get(
        f"/results/user/{submitted['user_id']}/quiz/{submitted['quiz_id']}", headers=auth_headers(student)
    )

    assert response.status_code == 200
    assert response.json()["id"] == submitted["id"]


def test_performance(client, student, submitted):
    response = client.get(f"/results/user/{submitted['user_id']}/performance", headers=auth_headers(student))

    assert response.status_code == 200
    body = response.json()
    assert body["total_quizzes"] == 1
    assert body["average_score"] == 6.0
    assert body["highest_score"] == 6.0
    assert body["quizzes_passed"] == 1


def test_empty_performance(client, student):
    response = client.get(f"/results/user/{student.id}/performance", headers=auth_headers(student))

    assert response.json()["total_quizzes"] == 0
    assert response.json()["recent_results"] == []


def test_quiz_results_exclude_practice(client, teacher, published_quiz, submitted):
    client.post(f"/quizzes/{published_quiz['id']}/submit", json={"answers": []}, headers=auth_headers(teacher))
    url = f"/results/quiz/{published_quiz['id']}"

    assert len(client.get(url, headers=auth_headers(teacher)).json()) == 1
    assert len(client.get(f"{url}?include_practice=true", headers=auth_headers(teacher)).json()) == 2


def test_students_cannot_list_quiz_results(client, student, published_quiz):
    response = client.get(f"/results/quiz/{published_quiz['id']}", headers=auth_headers(student))
    assert response.status_code == 403


def test_teacher_sees_results_of_own_quizzes(client, make_user, subject, submitted):
    other = make_user("other_teacher", UserRole.TEACHER)

    assert len(client.get("/results/", headers=auth_headers(other)).json()) == 0
    other_quiz = client.post("/quizzes/", json=quiz_payload(subject.id), headers=auth_headers(other))
    assert other_quiz.status_code == 201
    assert len(client.get("/results/", headers=auth_headers(other)).json()) == 0


def test_filter_results(client, admin, submitted):
    headers = auth_headers(admin)

    assert len(client.get("/results/?username=STU", headers=headers).json()) == 1
    assert len(client.get("/results/?quiz_title=history", headers=headers).json()) == 0
    today = submitted["created_at"][:10]
    assert len(client.get(f"/results/?date_from={today}&date_to={today}", headers=headers).json()) == 1

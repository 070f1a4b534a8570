def test_home_renders_question(client):
    snapshot = client.get("/api/question").json()

    response = client.get("/")

    assert response.status_code == 200
    assert "Danish Verbs Practice" in response.text
    assert snapshot["question"]["prompt"] in response.text
    assert "Verb details" in response.text


def test_first_question_is_translation(client):
    snapshot = client.get("/api/question").json()

    assert snapshot["current_index"] == 0
    assert snapshot["total_verbs"] == 3
    assert snapshot["question"]["mode"] == "translation"
    assert snapshot["state"] == "awaiting_answer"
    assert snapshot["last_result"] is None


def test_api_check_grades_answer(client):
    expected = client.get("/api/question").json()["question"]["expected_answer"]

    good = client.post("/api/check", data={"answer": f"  {expected.upper()} "})
    bad = client.post("/api/check", data={"answer": "no idea"})

    assert good.status_code == 200
    assert good.json()["is_correct"] is True
    assert bad.json() == {
        "user_answer": "no idea",
        "correct_answer": expected,
        "is_correct": False,
    }
    assert client.get("/api/question").json()["state"] == "answered"


def test_check_form_shows_result(client):
    expected = client.get("/api/question").json()["question"]["expected_answer"]

    response = client.post("/check", data={"answer": expected})

    assert response.status_code == 200
    assert "Correct!" in response.text

    response = client.post("/check", data={"answer": "wrong"})
    assert f"Incorrect. The correct answer is: {expected}" in response.text


def test_check_redirects_home(client):
    response = client.post("/check", data={"answer": "x"}, follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"].endswith("/")


def test_next_moves_to_following_verb(client):
    client.post("/api/check", data={"answer": "x"})

    snapshot = client.post("/api/next").json()

    assert snapshot["current_index"] == 1
    assert snapshot["last_result"] is None
    assert snapshot["user_answer"] == ""

    client.post("/next")
    assert client.get("/api/question").json()["current_index"] == 2


def test_static_stylesheet(client):
    assert client.get("/static/style.css").status_code == 200


def test_empty_dataset_shows_no_verbs_page(empty_client):
    response = empty_client.get("/")

    assert response.status_code == 503
    assert "No verbs available" in response.text


def test_empty_dataset_api_errors(empty_client):
    for response in (
        empty_client.get("/api/question"),
        empty_client.post("/api/check", data={"answer": "to eat"}),
        empty_client.post("/api/next"),
    ):
        assert response.status_code == 503
        assert response.json() == {"error": "No verbs available"}


def test_empty_dataset_form_posts_do_not_crash(empty_client):
    assert empty_client.post("/next").status_code == 503
    assert empty_client.post("/check", data={"answer": "x"}).status_code == 503

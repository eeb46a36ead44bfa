"""HTTP tests through the FastAPI app, bound to a temporary shell."""

import json

from parttime_jobs.schemas.schemas import Screen

STUDENT = {"email": "user1", "password": "toms1902"}
EMPLOYER = {"email": "user2", "password": "toms1902"}

JOB = {
    "title": "Student Barista",
    "location": "Dublin 2",
    "deadline": "2026-12-01",
    "description": "Flexible hours around lectures.",
    "salary_min": 12.5,
    "salary_max": 15.0,
    "responsibilities": ["Make coffee", ""],
}


def _login(client, account):
    response = client.post("/api/auth/login", json=account)
    assert response.status_code == 200
    return response.json()


def _post_job(client, **overrides):
    return client.post("/api/jobs", json={**JOB, **overrides})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["storage"] == "writable"
    assert response.json()["text_generation"] == "not configured"
    assert client.get("/").json()["screen"] == "feed"


class TestAuth:

    def test_guest_state(self, client):
        state = client.get("/api/shell").json()
        assert state["user"] is None
        assert state["screen"] == "feed"
        assert [n["label"] for n in state["navigation"]] == ["Find Job", "Hire Talent", "Login"]

    def test_student_login(self, client):
        state = _login(client, STUDENT)
        assert state["user"]["mode"] == "student"
        assert state["screen"] == "feed"
        assert state["show_auth_modal"] is False
        assert client.get("/api/auth/me").json()["token_valid"] is True

    def test_employer_login(self, client):
        assert _login(client, EMPLOYER)["screen"] == "dashboard"

    def test_wrong_demo_password(self, client):
        response = client.post("/api/auth/login", json={"email": "user1", "password": "nope"})
        assert response.status_code == 401

    def test_signup_validation(self, client):
        response = client.post("/api/auth/signup", json={
            "email": "new@ul.ie", "password": "abc", "confirm_password": "abc", "university": "University of Limerick (UL)"
        })
        assert response.status_code == 422

    def test_signup(self, client):
        response = client.post("/api/auth/signup", json={
            "email": "new@ul.ie", "password": "abcdef", "confirm_password": "abcdef",
            "mode": "employer", "company_name": "Limerick Lunches"
        })
        assert response.status_code == 201
        assert response.json()["screen"] == "dashboard"

    def test_logout(self, client):
        _login(client, EMPLOYER)
        state = client.post("/api/auth/logout").json()
        assert state["user"] is None
        assert state["screen"] == "feed"
        assert client.get("/api/auth/me").json() == {"user": None, "token_valid": False}

    def test_universities(self, client):
        names = client.get("/api/auth/universities").json()
        assert "Trinity College Dublin (TCD)" in names
        assert names == sorted(names)


class TestShell:

    def test_screen_request_is_filtered_by_role(self, client):
        _login(client, STUDENT)
        assert client.post("/api/shell/screen", json={"screen": "inbox"}).json()["screen"] == "feed"
        assert client.post("/api/shell/screen", json={"screen": "profile"}).json()["screen"] == "profile"

    def test_guest_mode_toggle(self, client):
        state = client.post("/api/shell/mode", json={"mode": "employer"}).json()
        assert state["screen"] == "dashboard"
        assert state["view"] == "employer-preview"

    def test_theme(self, client):
        assert client.post("/api/shell/theme").json()["dark_mode"] is True

    def test_unknown_screen(self, client):
        assert client.post("/api/shell/screen", json={"screen": "admin"}).status_code == 422


class TestJobs:

    def test_employer_posts_job(self, client):
        _login(client, EMPLOYER)
        response = _post_job(client)
        assert response.status_code == 201
        job = response.json()
        assert job["company"] == "Global Ventures Ltd"
        assert job["responsibilities"] == ["Make coffee"]

        assert client.get("/api/shell").json()["screen"] == "dashboard"
        assert client.get("/api/employers/jobs").json()["total"] == 1
        assert client.get("/api/jobs").json()["jobs"][0]["id"] == job["id"]

    def test_inverted_salary(self, client):
        _login(client, EMPLOYER)
        response = _post_job(client, salary_min=15, salary_max=10)
        assert response.status_code == 422
        assert response.json()["detail"] == "Minimum pay cannot be greater than maximum pay."
        assert client.get("/api/jobs").json()["total"] == 0

    def test_non_numeric_pay(self, client):
        _login(client, EMPLOYER)
        body = json.dumps({**JOB, "salary_min": float("nan")})
        response = client.post("/api/jobs", content=body, headers={"Content-Type": "application/json"})
        assert response.status_code == 422
        assert response.json()["detail"] == "Pay must be a valid amount."
        assert client.get("/api/jobs").json()["total"] == 0

    def test_student_cannot_post(self, client):
        _login(client, STUDENT)
        assert _post_job(client).status_code == 403

    def test_guest_cannot_post(self, client):
        assert _post_job(client).status_code == 401

    def test_search(self, client):
        _login(client, EMPLOYER)
        _post_job(client)
        _post_job(client, title="Library Assistant", location="Galway")
        body = client.get("/api/jobs", params={"search": "galway"}).json()
        assert [j["title"] for j in body["jobs"]] == ["Library Assistant"]

    def test_unknown_job(self, client):
        assert client.get("/api/jobs/nope").status_code == 404

    def test_description_draft_without_key(self, client):
        _login(client, EMPLOYER)
        response = client.post("/api/jobs/draft-description", json={"title": "Barista"})
        assert response.status_code == 200
        assert "API key not configured" in response.json()["text"]


class TestMessaging:

    def _job_as_student(self, client):
        _login(client, EMPLOYER)
        job = _post_job(client).json()
        client.post("/api/auth/logout")
        _login(client, STUDENT)
        return job

    def test_student_messages_employer(self, client):
        job = self._job_as_student(client)
        assert client.get(f"/api/jobs/{job['id']}").status_code == 200
        assert client.get("/api/shell").json()["selected_job_id"] == job["id"]

        response = client.post("/api/jobs/selected/messages", json={"text": "Hello"})
        assert response.status_code == 201
        assert response.json()["job_id"] == job["id"]
        assert response.json()["is_read"] is False

        client.post("/api/auth/logout")
        _login(client, EMPLOYER)
        inbox = client.get("/api/employers/inbox").json()
        assert inbox["total"] == 1
        assert inbox["entries"][0]["message"]["text"] == "Hello"
        assert inbox["entries"][0]["job"]["id"] == job["id"]
        assert client.get("/api/shell").json()["screen"] == Screen.inbox.value

    def test_message_without_open_job(self, client):
        self._job_as_student(client)
        client.delete("/api/jobs/selected")
        response = client.post("/api/jobs/selected/messages", json={"text": "Hello"})
        assert response.status_code == 409

    def test_blank_message(self, client):
        job = self._job_as_student(client)
        client.get(f"/api/jobs/{job['id']}")
        assert client.post("/api/jobs/selected/messages", json={"text": "  "}).status_code == 422

    def test_employer_cannot_message(self, client):
        _login(client, EMPLOYER)
        job = _post_job(client).json()
        client.get(f"/api/jobs/{job['id']}")
        assert client.post("/api/jobs/selected/messages", json={"text": "Hi"}).status_code == 403

    def test_student_has_no_inbox(self, client):
        _login(client, STUDENT)
        assert client.get("/api/employers/inbox").status_code == 403


class TestProfile:

    def test_edit_and_save(self, client):
        _login(client, STUDENT)
        profile = client.get("/api/students/profile").json()
        assert profile["first_name"] == "Test"

        client.patch("/api/students/profile", json={"skills_text": "Excel, excel, Retail"})
        client.post("/api/students/profile/experience")
        updated = client.patch("/api/students/profile/experience/0", json={"role": "Shop Assistant"}).json()
        assert updated["skills"] == ["Excel", "Retail"]
        assert updated["experience"][0]["role"] == "Shop Assistant"

        saved = client.post("/api/students/profile/save")
        assert saved.status_code == 200
        assert saved.json() == {"type": "success", "text": "Profile saved successfully!"}

    def test_missing_experience_row(self, client):
        _login(client, STUDENT)
        assert client.delete("/api/students/profile/experience/5").status_code == 404

    def test_improve_empty_bio(self, client):
        _login(client, STUDENT)
        client.patch("/api/students/profile", json={"bio": ""})
        assert client.post("/api/students/profile/improve-bio").status_code == 422

    def test_tracker(self, client):
        _login(client, STUDENT)
        assert client.get("/api/students/applications").json() == []
        assert client.get("/api/shell").json()["screen"] == "tracker"

    def test_employer_has_no_profile(self, client):
        _login(client, EMPLOYER)
        assert client.get("/api/students/profile").status_code == 403

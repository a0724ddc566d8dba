"""
API tests for /api/jobs
"""


class TestSearch:
    def test_default_page(self, client, settings):
        response = client.get("/api/jobs")
        assert response.status_code == 200
        body = response.json()
        assert body["total"] == settings.seed_target_jobs
        assert body["page"] == 1
        assert len(body["jobs"]) == 20
        assert body["jobs"][0]["id"] == "g-1"

    def test_text_and_work_mode(self, client):
        response = client.get("/api/jobs", params={"q": "frontend engineer", "work_mode": ["Hybrid"]})
        ids = [j["id"] for j in response.json()["jobs"]]
        assert "g-1" in ids
        assert all(j["work_mode"] == "Hybrid" for j in response.json()["jobs"])

    def test_salary_range(self, client):
        response = client.get("/api/jobs", params={"salary_range": "15+", "page_size": 100})
        assert response.status_code == 200
        assert all(j["max_salary"] >= 15 for j in response.json()["jobs"])

    def test_skills_filter(self, client):
        response = client.get("/api/jobs", params={"skills": ["Golang"]})
        assert [j["id"] for j in response.json()["jobs"]] == ["z-2"]

    def test_bad_salary_range(self, client):
        response = client.get("/api/jobs", params={"salary_range": "lots"})
        assert response.status_code == 400

    def test_non_finite_salary_range(self, client):
        for value in ("nan-nan", "inf+"):
            assert client.get("/api/jobs", params={"salary_range": value}).status_code == 400

    def test_page_size_limit(self, client):
        assert client.get("/api/jobs", params={"page_size": 500}).status_code == 422

    def test_unknown_work_mode(self, client):
        assert client.get("/api/jobs", params={"work_mode": ["Moon"]}).status_code == 422


def test_skills(client):
    skills = client.get("/api/jobs/skills").json()["skills"]
    assert skills == sorted(skills)
    assert "React" in skills
    assert len(skills) == len(set(skills))


def test_stats(client, settings):
    body = client.get("/api/jobs/stats").json()
    assert body["job_count"] == settings.seed_target_jobs
    assert len(body["featured_jobs"]) == 8
    assert body["top_companies"][0]["name"] == "Google"


class TestDetail:
    def test_anonymous(self, client):
        body = client.get("/api/jobs/ms-2").json()
        assert body["job"]["title"] == "Data Scientist II"
        assert body["has_applied"] is False
        assert body["is_saved"] is False

    def test_not_found(self, client):
        response = client.get("/api/jobs/nope")
        assert response.status_code == 404
        assert response.json()["detail"] == "Job not found"

    def test_bad_token_is_anonymous(self, client):
        response = client.get("/api/jobs/g-1", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 200
        assert response.json()["has_applied"] is False


class TestApply:
    def test_apply_increments_applicants(self, client, candidate):
        headers, user = candidate
        before = client.get("/api/jobs/tcs-1").json()["job"]["applicants_count"]

        response = client.post("/api/jobs/tcs-1/apply", headers=headers)

        assert response.status_code == 201
        application = response.json()
        assert application["status"] == "Applied"
        assert application["candidate_id"] == user["id"]

        detail = client.get("/api/jobs/tcs-1", headers=headers).json()
        assert detail["job"]["applicants_count"] == before + 1
        assert detail["has_applied"] is True

    def test_apply_twice(self, client, candidate):
        headers, _ = candidate
        client.post("/api/jobs/a-2/apply", headers=headers)
        before = client.get("/api/jobs/a-2").json()["job"]["applicants_count"]

        response = client.post("/api/jobs/a-2/apply", headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Already applied to this job"
        assert client.get("/api/jobs/a-2").json()["job"]["applicants_count"] == before

    def test_apply_unknown_job(self, client, candidate):
        headers, _ = candidate
        assert client.post("/api/jobs/nope/apply", headers=headers).status_code == 404

    def test_recruiter_cannot_apply(self, client, recruiter):
        headers, _ = recruiter
        response = client.post("/api/jobs/g-1/apply", headers=headers)
        assert response.status_code == 403
        assert response.json()["detail"] == "Candidates only"

    def test_requires_login(self, client):
        assert client.post("/api/jobs/g-1/apply").status_code in (401, 403)

    def test_corrupted_applications_refused(self, client, candidate, db, storage):
        headers, _ = candidate
        storage.set_item(db.keys["applications"], "not json")

        response = client.post("/api/jobs/g-1/apply", headers=headers)

        assert response.status_code == 500
        assert storage.get_item(db.keys["applications"]) == "not json"


class TestSave:
    def test_toggle(self, client, candidate):
        headers, _ = candidate

        saved = client.post("/api/jobs/z-1/save", headers=headers).json()
        assert saved == {"saved_job_ids": ["z-1"], "is_saved": True}
        assert client.get("/api/jobs/z-1", headers=headers).json()["is_saved"] is True

        unsaved = client.post("/api/jobs/z-1/save", headers=headers).json()
        assert unsaved == {"saved_job_ids": [], "is_saved": False}

    def test_unknown_job(self, client, candidate):
        headers, _ = candidate
        assert client.post("/api/jobs/nope/save", headers=headers).status_code == 404

    def test_saved_per_user(self, client, candidate, login_as):
        headers, _ = candidate
        client.post("/api/jobs/g-2/save", headers=headers)

        other_headers, _ = login_as("neha@mail.com", name="Neha")
        assert client.get("/api/jobs/g-2", headers=other_headers).json()["is_saved"] is False

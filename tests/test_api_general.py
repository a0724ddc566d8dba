"""
API tests for auth, companies, the AI assistant and health endpoints
"""

from datetime import timedelta

from jobportal.core.auth import create_access_token


class TestAuth:
    def test_first_login_registers(self, client, db):
        response = client.post(
            "/api/auth/login", json={"email": "Asha@Mail.com", "name": " Asha ", "role": "CANDIDATE"}
        )
        assert response.status_code == 200
        body = response.json()
        user = body["user"]

        assert body["token_type"] == "bearer"
        assert user["email"] == "asha@mail.com"
        assert user["name"] == "Asha"
        assert user["role"] == "CANDIDATE"
        assert len(user["id"]) == 9
        assert user["profile_pic"] == "https://picsum.photos/seed/Asha/200/200"
        assert db.users.find_one("asha@mail.com")["id"] == user["id"]

    def test_returning_user_keeps_account(self, client, login_as):
        _, first = login_as("ravi@mail.com", name="Ravi", role="RECRUITER")
        _, second = login_as("RAVI@mail.com", name="Someone Else", role="CANDIDATE")
        assert second["id"] == first["id"]
        assert second["name"] == "Ravi"
        assert second["role"] == "RECRUITER"

    def test_role_defaults_to_candidate(self, client):
        body = client.post("/api/auth/login", json={"email": "x@mail.com", "name": "X"}).json()
        assert body["user"]["role"] == "CANDIDATE"

    def test_invalid_email(self, client):
        response = client.post("/api/auth/login", json={"email": "not-an-email", "name": "X"})
        assert response.status_code == 422

    def test_blank_name(self, client):
        response = client.post("/api/auth/login", json={"email": "x@mail.com", "name": "   "})
        assert response.status_code == 422

    def test_me(self, client, candidate):
        headers, user = candidate
        body = client.get("/api/auth/me", headers=headers).json()
        assert body["id"] == user["id"]
        assert body["email"] == "asha@mail.com"

    def test_me_bad_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    def test_me_expired_token(self, client, candidate):
        _, user = candidate
        token = create_access_token({"sub": user["id"]}, expires_delta=timedelta(minutes=-5))
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_me_unknown_user(self, client):
        token = create_access_token({"sub": "ghost"})
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401


class TestCompanies:
    def test_list(self, client):
        companies = client.get("/api/companies").json()
        assert len(companies) == 24
        assert companies[0]["name"] == "Google"

    def test_search(self, client):
        names = [c["name"] for c in client.get("/api/companies", params={"search": "banking"}).json()]
        assert names == ["HDFC Bank", "ICICI Bank"]

    def test_top(self, client):
        names = [c["name"] for c in client.get("/api/companies/top").json()]
        assert names == ["Google", "Amazon", "Microsoft", "Meta", "Netflix"]

    def test_detail(self, client):
        body = client.get("/api/companies/13").json()
        assert body["name"] == "Razorpay"
        assert body["industry"] == "FinTech"

    def test_detail_not_found(self, client):
        assert client.get("/api/companies/99").status_code == 404

    def test_company_jobs(self, client):
        jobs = client.get("/api/companies/7/jobs").json()
        ids = [j["id"] for j in jobs]
        assert "tcs-1" in ids and "tcs-2" in ids
        assert all(j["company"] == "TCS" for j in jobs)

    def test_company_jobs_not_found(self, client):
        assert client.get("/api/companies/99/jobs").status_code == 404


class TestAssistant:
    def test_greeting(self, client):
        text = client.get("/api/assistant/greeting").json()["text"]
        assert text.startswith("Hello! I'm your AI Career Assistant.")

    def test_chat(self, client, ai):
        response = client.post(
            "/api/assistant/chat",
            json={
                "message": "Any Python roles?",
                "history": [{"role": "model", "text": "Hello!"}, {"role": "user", "text": "Hi"}],
            },
        )
        assert response.status_code == 200
        assert response.json() == {"text": "Happy to help!"}

        message, history = ai.chat_with_assistant.call_args.args
        assert message == "Any Python roles?"
        assert [turn.role.value for turn in history] == ["model", "user"]

    def test_blank_message(self, client, ai):
        response = client.post("/api/assistant/chat", json={"message": "   "})
        assert response.status_code == 422
        ai.chat_with_assistant.assert_not_called()

    def test_unknown_history_role(self, client):
        response = client.post(
            "/api/assistant/chat", json={"message": "hi", "history": [{"role": "system", "text": "x"}]}
        )
        assert response.status_code == 422


class TestHealth:
    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "healthy"
        assert body["app"] == "JobPortal"

    def test_health(self, client, settings):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["storage_connected"] is True
        assert body["jobs"] == settings.seed_target_jobs
        assert body["ai_configured"] is False

"""HTTP tests for the v1 API: bearer handling, login, admin gating, and article/comment ownership."""

import unittest
from datetime import UTC, datetime, timedelta
from typing import Annotated
from unittest.mock import MagicMock

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.testclient import TestClient

from app.api.v1.auth import get_claims, optional_auth, require_auth
from app.api.v1.deps import get_authenticator, get_token_codec
from app.core.database import get_db
from app.core.errors import ServiceError
from app.core.roles import RoleName
from app.main import app, service_error_handler
from app.schemas.auth import Claims
from app.services.auth import Authenticator
from support import OTHER_SECRET, add_user, make_codec, make_session_factory

API = "/api/v1"


class ApiTestCase(unittest.TestCase):
    """Fresh SQLite database per test with alice (user), bob (user) and root (admin)."""

    def setUp(self) -> None:
        session_factory = make_session_factory()

        def override_get_db():
            db = session_factory()
            try:
                yield db
            finally:
                db.close()

        self.codec = make_codec()
        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_token_codec] = lambda: self.codec
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

        with session_factory() as session:
            self.alice_id = add_user(
                session, "alice@example.com", name="Alice", login="alice", password="secret123"
            ).id
            self.bob_id = add_user(session, "bob@example.com", name="Bob").id
            self.root_id = add_user(session, "root@example.com", name="Root", role="admin").id

    def token_for(self, user_id: int, email: str, role: RoleName = RoleName.USER) -> str:
        return self.codec.issue(user_id=user_id, email=email, role=role)

    def auth(self, user_id: int, email: str, role: RoleName = RoleName.USER) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token_for(user_id, email, role)}"}

    @property
    def alice(self) -> dict[str, str]:
        return self.auth(self.alice_id, "alice@example.com")

    @property
    def bob(self) -> dict[str, str]:
        return self.auth(self.bob_id, "bob@example.com")

    @property
    def root(self) -> dict[str, str]:
        return self.auth(self.root_id, "root@example.com", RoleName.ADMIN)


class TestBearerHeader(ApiTestCase):
    """GET /auth/profile is protected by require_auth."""

    def assert_unauthenticated(self, headers: dict[str, str]) -> None:
        response = self.client.get(f"{API}/auth/profile", headers=headers)
        self.assertEqual(response.status_code, 401, response.text)
        self.assertEqual(response.headers.get("WWW-Authenticate"), "Bearer")

    def test_missing_header(self) -> None:
        self.assert_unauthenticated({})

    def test_empty_header(self) -> None:
        self.assert_unauthenticated({"Authorization": ""})

    def test_malformed_headers(self) -> None:
        valid = self.token_for(self.alice_id, "alice@example.com")
        for value in ("Token abc", "Bearer", f"Bearer {valid} extra", f"bearer {valid}"):
            with self.subTest(header=value):
                self.assert_unauthenticated({"Authorization": value})

    def test_invalid_tokens(self) -> None:
        expired = make_codec(expire_minutes=1).issue(
            user_id=self.alice_id,
            email="alice@example.com",
            role=RoleName.USER,
            now=datetime.now(UTC) - timedelta(minutes=5),
        )
        foreign = make_codec(secret=OTHER_SECRET).issue(
            user_id=self.alice_id, email="alice@example.com", role=RoleName.ADMIN
        )
        for token in ("garbage", expired, foreign):
            with self.subTest(token=token[:16]):
                self.assert_unauthenticated({"Authorization": f"Bearer {token}"})

    def test_valid_token_returns_profile(self) -> None:
        response = self.client.get(f"{API}/auth/profile", headers=self.alice)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["id"], self.alice_id)
        self.assertEqual(body["email"], "alice@example.com")
        self.assertEqual(body["role"], "user")


class TestLogin(ApiTestCase):
    def test_login_success_returns_usable_token(self) -> None:
        response = self.client.post(
            f"{API}/auth/login", json={"login": "alice", "password": "secret123"}
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["token_type"], "bearer")
        self.assertEqual(body["user"]["email"], "alice@example.com")
        self.assertEqual(body["user"]["role"]["name"], "user")
        profile = self.client.get(
            f"{API}/auth/profile", headers={"Authorization": f"Bearer {body['token']}"}
        )
        self.assertEqual(profile.json()["id"], self.alice_id)

    def test_wrong_password_and_unknown_login_look_the_same(self) -> None:
        wrong = self.client.post(f"{API}/auth/login", json={"login": "alice", "password": "nope"})
        unknown = self.client.post(f"{API}/auth/login", json={"login": "nobody", "password": "x"})
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json(), unknown.json())
        self.assertEqual(wrong.json(), {"detail": "Invalid credentials"})

    def test_malformed_body_is_422(self) -> None:
        response = self.client.post(f"{API}/auth/login", json={"login": "al"})
        self.assertEqual(response.status_code, 422)


class TestAdminRoutes(ApiTestCase):
    def test_user_role_is_forbidden(self) -> None:
        response = self.client.get(f"{API}/admin/users", headers=self.alice)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"detail": "Admin access required"})

    def test_anonymous_is_unauthenticated(self) -> None:
        response = self.client.get(f"{API}/admin/roles")
        self.assertEqual(response.status_code, 401)

    def test_admin_lists_users_and_roles(self) -> None:
        users = self.client.get(f"{API}/admin/users", headers=self.root)
        self.assertEqual(users.status_code, 200)
        self.assertEqual(len(users.json()["users"]), 3)
        roles = self.client.get(f"{API}/admin/roles", headers=self.root)
        self.assertEqual(sorted(r["name"] for r in roles.json()["roles"]), ["admin", "user"])

    def test_admin_creates_credentials_then_user_logs_in(self) -> None:
        created = self.client.post(
            f"{API}/admin/credentials",
            json={"user_id": self.bob_id, "login": "bobby", "password": "hunter22"},
            headers=self.root,
        )
        self.assertEqual(created.status_code, 201, created.text)
        self.assertEqual(created.json()["login"], "bobby")
        self.assertNotIn("password", created.json())

        login = self.client.post(f"{API}/auth/login", json={"login": "bobby", "password": "hunter22"})
        self.assertEqual(login.status_code, 200)
        self.assertEqual(login.json()["user"]["id"], self.bob_id)

    def test_duplicate_credentials_conflict(self) -> None:
        response = self.client.post(
            f"{API}/admin/credentials",
            json={"user_id": self.alice_id, "login": "alice2", "password": "pw"},
            headers=self.root,
        )
        self.assertEqual(response.status_code, 409)

    def test_password_change_applies_to_next_login(self) -> None:
        changed = self.client.put(
            f"{API}/admin/credentials/{self.alice_id}",
            json={"password": "new-secret"},
            headers=self.root,
        )
        self.assertEqual(changed.status_code, 200)
        old = self.client.post(f"{API}/auth/login", json={"login": "alice", "password": "secret123"})
        new = self.client.post(f"{API}/auth/login", json={"login": "alice", "password": "new-secret"})
        self.assertEqual(old.status_code, 401)
        self.assertEqual(new.status_code, 200)


class TestUsers(ApiTestCase):
    def test_register_and_duplicate(self) -> None:
        body = {"email": "carol@example.com", "name": "Carol"}
        created = self.client.post(f"{API}/users", json=body)
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["role"]["name"], "user")
        self.assertEqual(self.client.post(f"{API}/users", json=body).status_code, 409)

    def test_get_user_requires_auth(self) -> None:
        self.assertEqual(self.client.get(f"{API}/users/{self.bob_id}").status_code, 401)
        response = self.client.get(f"{API}/users/{self.bob_id}", headers=self.alice)
        self.assertEqual(response.json()["name"], "Bob")


class TestArticlesAndComments(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        response = self.client.post(
            f"{API}/articles",
            json={"title": "Hello world", "content": "First article content"},
            headers=self.alice,
        )
        self.assertEqual(response.status_code, 201, response.text)
        self.article_id = response.json()["id"]

    def test_create_requires_auth(self) -> None:
        response = self.client.post(
            f"{API}/articles", json={"title": "Anon", "content": "Anonymous content"}
        )
        self.assertEqual(response.status_code, 401)

    def test_public_read_ignores_bad_token(self) -> None:
        for headers in ({}, {"Authorization": "Bearer junk"}, {"Authorization": "Basic xyz"}, self.bob):
            with self.subTest(headers=headers):
                response = self.client.get(f"{API}/articles/{self.article_id}", headers=headers)
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.json()["author_name"], "Alice")

    def test_list_includes_author_name(self) -> None:
        response = self.client.get(f"{API}/articles", params={"limit": 5})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([a["author_name"] for a in response.json()], ["Alice"])
        by_author = self.client.get(f"{API}/users/{self.alice_id}/articles")
        self.assertEqual([a["id"] for a in by_author.json()], [self.article_id])

    def test_public_lists_ignore_bad_token(self) -> None:
        for headers in ({"Authorization": ""}, {"Authorization": "Bearer junk"}, self.bob):
            with self.subTest(headers=headers):
                listed = self.client.get(f"{API}/articles", headers=headers)
                self.assertEqual(listed.status_code, 200)
                by_author = self.client.get(f"{API}/users/{self.alice_id}/articles", headers=headers)
                self.assertEqual(by_author.status_code, 200)

    def test_invalid_pagination_is_422(self) -> None:
        self.assertEqual(self.client.get(f"{API}/articles", params={"limit": 0}).status_code, 422)
        self.assertEqual(self.client.get(f"{API}/articles", params={"offset": -1}).status_code, 422)

    def test_non_owner_cannot_update(self) -> None:
        response = self.client.put(
            f"{API}/articles/{self.article_id}", json={"title": "Mine now"}, headers=self.bob
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json(), {"detail": "Access denied"})

    def test_owner_updates(self) -> None:
        response = self.client.put(
            f"{API}/articles/{self.article_id}", json={"title": "Hello again"}, headers=self.alice
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["title"], "Hello again")

    def test_missing_article_is_404_for_everyone(self) -> None:
        for headers in (self.bob, self.root):
            with self.subTest(headers=headers):
                response = self.client.delete(f"{API}/articles/99999", headers=headers)
                self.assertEqual(response.status_code, 404)

    def test_admin_deletes_foreign_article(self) -> None:
        denied = self.client.delete(f"{API}/articles/{self.article_id}", headers=self.bob)
        self.assertEqual(denied.status_code, 403)
        deleted = self.client.delete(f"{API}/articles/{self.article_id}", headers=self.root)
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(self.client.get(f"{API}/articles/{self.article_id}").status_code, 404)

    def test_comment_flow(self) -> None:
        url = f"{API}/articles/{self.article_id}/comments"
        created = self.client.post(url, json={"text": "Great read", "rating": 5}, headers=self.bob)
        self.assertEqual(created.status_code, 201, created.text)
        comment_id = created.json()["id"]
        self.assertEqual(created.json()["user_id"], self.bob_id)

        bad = self.client.post(url, json={"text": "Too high", "rating": 6}, headers=self.bob)
        self.assertEqual(bad.status_code, 422)

        self.assertEqual(len(self.client.get(url).json()), 1)
        article = self.client.get(f"{API}/articles/{self.article_id}").json()
        self.assertEqual((article["rating_avg"], article["rating_count"]), (5.0, 1))

        denied = self.client.put(
            f"{API}/comments/{comment_id}", json={"rating": 1}, headers=self.alice
        )
        self.assertEqual(denied.status_code, 403)
        updated = self.client.put(
            f"{API}/comments/{comment_id}", json={"rating": 4}, headers=self.bob
        )
        self.assertEqual(updated.json()["rating"], 4)

        self.assertEqual(
            self.client.delete(f"{API}/comments/{comment_id}", headers=self.root).status_code, 204
        )
        self.assertEqual(
            self.client.delete(f"{API}/comments/{comment_id}", headers=self.bob).status_code, 404
        )

    def test_comment_on_missing_article_is_404(self) -> None:
        response = self.client.post(
            f"{API}/articles/99999/comments", json={"text": "Hi", "rating": 3}, headers=self.bob
        )
        self.assertEqual(response.status_code, 404)


class TestRequestClaims(unittest.TestCase):
    """Claims travel on request.state from the auth dependencies to get_claims."""

    def setUp(self) -> None:
        self.codec = make_codec()
        authenticator = Authenticator(MagicMock(), MagicMock(), self.codec)

        guarded = APIRouter(dependencies=[Depends(require_auth)])

        @guarded.get("/guarded")
        def guarded_route(claims: Annotated[Claims, Depends(get_claims)]) -> dict:
            return {"user_id": claims.user_id}

        wired = FastAPI()
        wired.add_exception_handler(ServiceError, service_error_handler)
        wired.include_router(guarded)

        @wired.get("/unguarded")
        def unguarded_route(claims: Annotated[Claims, Depends(get_claims)]) -> dict:
            return {"user_id": claims.user_id}

        @wired.get("/optional", dependencies=[Depends(optional_auth)])
        def optional_route(request: Request) -> dict:
            claims = getattr(request.state, "claims", None)
            return {"user_id": claims.user_id if claims is not None else None}

        wired.dependency_overrides[get_authenticator] = lambda: authenticator
        self.client = TestClient(wired)
        token = self.codec.issue(user_id=7, email="guest@example.com", role=RoleName.USER)
        self.valid = {"Authorization": f"Bearer {token}"}

    def test_handler_without_guard_is_server_error(self) -> None:
        response = self.client.get("/unguarded", headers=self.valid)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "User context not found"})

    def test_guarded_handler_reads_claims(self) -> None:
        response = self.client.get("/guarded", headers=self.valid)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"user_id": 7})
        self.assertEqual(self.client.get("/guarded").status_code, 401)

    def test_optional_auth_attaches_claims_for_valid_token(self) -> None:
        response = self.client.get("/optional", headers=self.valid)
        self.assertEqual(response.json(), {"user_id": 7})

    def test_optional_auth_leaves_state_empty_otherwise(self) -> None:
        for headers in ({}, {"Authorization": ""}, {"Authorization": "Bearer junk"}):
            with self.subTest(headers=headers):
                response = self.client.get("/optional", headers=headers)
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.json(), {"user_id": None})


class TestHealth(ApiTestCase):
    def test_health_reports_database(self) -> None:
        response = self.client.get(f"{API}/health/")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")


if __name__ == "__main__":
    unittest.main()

"""
Tests for the /auth and /user endpoints.
"""
from datetime import timedelta

import pytest

from boutique.core.auth.service import AuthService
from boutique.shared.database.models import User


class TestLogin:

    def test_login_json_returns_token(self, client, admin_user):
        response = client.post(
            "/auth/login-json",
            json={"email": "admin@boutique.com", "password": "secret123"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["user"]["roles"] == ["admin"]

    def test_login_form_returns_token(self, client, regular_user):
        response = client.post(
            "/auth/login",
            data={"username": "user@boutique.com", "password": "secret123"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "user@boutique.com"

    def test_wrong_password_returns_401(self, client, regular_user):
        response = client.post(
            "/auth/login-json",
            json={"email": "user@boutique.com", "password": "wrong-password"},
        )

        assert response.status_code == 401

    def test_inactive_user_returns_403(self, client, db, regular_user):
        regular_user.is_active = False
        db.commit()

        response = client.post(
            "/auth/login-json",
            json={"email": "user@boutique.com", "password": "secret123"},
        )

        assert response.status_code == 403

    def test_token_from_login_opens_me(self, client, regular_user):
        token = client.post(
            "/auth/login-json",
            json={"email": "user@boutique.com", "password": "secret123"},
        ).json()["access_token"]

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["name"] == "Regular"


class TestUserEndpoints:

    def test_regular_user_cannot_list_users(self, client, user_headers):
        response = client.get("/user", headers=user_headers)

        assert response.status_code == 403

    def test_admin_creates_user_without_exposing_hash(self, client, admin_headers):
        response = client.post(
            "/user",
            json={"name": "Bia", "email": "bia@boutique.com", "password": "secret123"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["roles"] == ["user"]
        assert "password_hash" not in data

    def test_duplicate_email_returns_400(self, client, admin_headers, regular_user):
        response = client.post(
            "/user",
            json={"name": "Copy", "email": "user@boutique.com", "password": "secret123"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Email already registered"

    def test_unknown_role_returns_422(self, client, admin_headers):
        response = client.post(
            "/user",
            json={"name": "Bia", "email": "bia@boutique.com", "password": "secret123", "roles": ["root"]},
            headers=admin_headers,
        )

        assert response.status_code == 422

    def test_find_by_exact_name(self, client, admin_headers, regular_user):
        response = client.get("/user/name-exact/Regular", headers=admin_headers)

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [regular_user.id]

    def test_find_by_email(self, client, admin_headers, regular_user):
        response = client.get("/user/email/user@boutique.com", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["id"] == regular_user.id


class TestAccessToken:

    def test_claims_describe_the_user(self, admin_user):
        token = AuthService.create_access_token(admin_user)

        claims = AuthService.verify_token(token)
        assert claims["sub"] == str(admin_user.id)
        assert claims["user_id"] == admin_user.id
        assert claims["email"] == "admin@boutique.com"
        assert claims["roles"] == ["admin"]
        assert claims["exp"] > claims["iat"]

    def test_unsaved_user_cannot_get_a_token(self):
        with pytest.raises(ValueError):
            AuthService.create_access_token(User(name="Ghost", email="ghost@boutique.com"))

    def test_expired_token_is_rejected(self, client, regular_user):
        token = AuthService.create_access_token(regular_user, expires_delta=timedelta(minutes=-1))

        assert AuthService.user_id_from_token(token) is None
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_tampered_token_is_rejected(self, regular_user):
        token = AuthService.create_access_token(regular_user)

        assert AuthService.user_id_from_token(token + "x") is None


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

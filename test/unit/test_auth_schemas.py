"""
Unit tests for backend/quizmo/routes/auth.py: Pydantic request models
Tests: RegisterRequest validation (username rules, password rules, email
normalisation), LoginRequest; pure Pydantic validation, no HTTP stack.
"""

import pytest
from pydantic import ValidationError

from quizmo.routes.auth import RegisterRequest, LoginRequest


class TestRegisterRequestValid:

    def test_minimal_valid_payload(self):
        req = RegisterRequest(username="alice", email="user@example.com", password="Pass12")
        assert req.username == "alice"

    def test_email_lowercased(self):
        req = RegisterRequest(username="alice", email="Alice@Example.COM", password="Pass12")
        assert req.email == "alice@example.com"

    def test_underscored_username(self):
        req = RegisterRequest(username="quiz_fan_99", email="u@example.com", password="Pass12")
        assert req.username == "quiz_fan_99"


class TestRegisterUsernameValidation:

    @pytest.mark.parametrize("username", ["ab", "a" * 31])
    def test_length_bounds(self, username):
        with pytest.raises(ValidationError, match="between 3 and 30"):
            RegisterRequest(username=username, email="u@example.com", password="Pass12")

    @pytest.mark.parametrize("username", ["has space", "dash-name", "emoji🙂"])
    def test_bad_characters(self, username):
        with pytest.raises(ValidationError, match="letters, numbers, and underscores"):
            RegisterRequest(username=username, email="u@example.com", password="Pass12")


class TestRegisterPasswordValidation:

    @pytest.mark.parametrize("password, message", [
        ("Ab1", "at least 6 characters"),
        ("alllower1", "uppercase"),
        ("ALLUPPER1", "lowercase"),
        ("NoDigitsHere", "digit"),
    ])
    def test_rules(self, password, message):
        with pytest.raises(ValidationError, match=message):
            RegisterRequest(username="alice", email="u@example.com", password=password)


class TestLoginRequest:

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            LoginRequest(email="not-an-email", password="x")

    def test_empty_password_rejected(self):
        with pytest.raises(ValidationError, match="Password is required"):
            LoginRequest(email="u@example.com", password="")

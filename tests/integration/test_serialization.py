"""Integration tests for value objects inside pydantic models."""

import json
from dataclasses import dataclass

import pydantic
import pytest
from pydantic import BaseModel

from custom_type import CountryCode, Email, PhoneNumber, RawPassword, Url


class User(BaseModel):
    username: str
    email: Email
    password: RawPassword
    socmed_url: Url
    phone: PhoneNumber | None = None


@dataclass
class RegisterUserRequest:
    username: str
    email: str
    password: str
    socmed_url: str

    def to_user(self) -> User:
        return User(
            username=self.username,
            email=Email.parse(self.email).unwrap(),
            password=RawPassword.parse_strict(self.password).unwrap(),
            socmed_url=Url.parse(self.socmed_url).unwrap(),
        )


VALID_PAYLOAD = {
    "username": "user123",
    "email": "example@example.com",
    "password": "Valid123!",
    "socmed_url": "https://example.com/useridex",
}


@pytest.mark.integration
class TestModelValidation:
    """Test suite for validating models from plain strings."""

    def test_register_request_to_user(self):
        request = RegisterUserRequest(
            username="user123",
            email="example@example.com",
            password="Valid123!",
            socmed_url="https://example.com/useridex",
        )

        user = request.to_user()

        assert user.email == Email.parse("example@example.com").unwrap()
        assert str(user.password) == "Valid123!"
        assert json.loads(user.model_dump_json()) == {**VALID_PAYLOAD, "phone": None}

    def test_validate_from_strings(self):
        user = User.model_validate({**VALID_PAYLOAD, "phone": "+441234567890"})

        assert isinstance(user.email, Email)
        assert isinstance(user.password, RawPassword)
        assert isinstance(user.socmed_url, Url)
        assert user.phone.country_code is CountryCode.UK
        assert user.phone.national_number == "1234567890"

    def test_validation_goes_through_parse(self):
        user = User.model_validate({**VALID_PAYLOAD, "email": "Example@EXAMPLE.com"})

        assert user.email.value == "example@example.com"

    def test_existing_instances_are_accepted(self):
        email = Email.parse("example@example.com").unwrap()

        user = User(**{**VALID_PAYLOAD, "email": email})

        assert user.email is email

    @pytest.mark.parametrize("field,value,message", [
        ("email", "not-an-email", "unable to parse email, invalid email."),
        ("socmed_url", "example.com", "unable to parse URL, invalid URL."),
        ("password", "weakpass", "Strict password: must be at least 8 characters"),
        ("phone", "+999", "unable to parse phone number, invalid phone number."),
    ])
    def test_invalid_field(self, field, value, message):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            User.model_validate({**VALID_PAYLOAD, field: value})

        errors = exc_info.value.errors()
        assert errors[0]["loc"][0] == field
        assert message in errors[0]["msg"]

    def test_password_tier_follows_settings(self, monkeypatch):
        monkeypatch.setenv("CUSTOM_TYPE_PASSWORD_STRENGTH", "weak")

        user = User.model_validate({**VALID_PAYLOAD, "password": "weakpass"})

        assert str(user.password) == "weakpass"


@pytest.mark.integration
class TestModelSerialization:
    """Test suite for dumping models to plain strings."""

    def test_model_dump(self):
        user = User.model_validate(VALID_PAYLOAD)

        assert user.model_dump() == {**VALID_PAYLOAD, "phone": None}
        assert user.model_dump(mode="json") == {**VALID_PAYLOAD, "phone": None}

    def test_json_round_trip(self):
        user = User.model_validate({**VALID_PAYLOAD, "phone": "+2341234567890"})

        restored = User.model_validate_json(user.model_dump_json())

        assert restored == user
        assert restored.phone.country_code is CountryCode.NGA

    def test_json_input_must_be_string(self):
        with pytest.raises(pydantic.ValidationError):
            User.model_validate_json(json.dumps({**VALID_PAYLOAD, "email": 42}))

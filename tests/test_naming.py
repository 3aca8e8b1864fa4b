"""Tests for the naming module."""

from apigen.naming import (
    argument_name,
    camel,
    kebab,
    params_in_path,
    pascal,
    strip_trailing_placeholder,
    to_template_route,
    trailing_placeholder,
)


class TestCaseConversion:
    """Test identifier case conversion."""

    def test_pascal_from_camel(self):
        assert pascal("listPets") == "ListPets"

    def test_pascal_from_snake(self):
        assert pascal("list_pets") == "ListPets"

    def test_pascal_from_title(self):
        assert pascal("Swagger Petstore") == "SwaggerPetstore"

    def test_pascal_from_kebab(self):
        assert pascal("find-pets-by-tag") == "FindPetsByTag"

    def test_camel_from_pascal(self):
        assert camel("ListPets") == "listPets"

    def test_camel_lowercases_leading_acronym(self):
        assert camel("HTTPStatus") == "httpStatus"

    def test_camel_roundtrip_is_stable(self):
        """camel(pascal(x)) must be deterministic for the same id."""
        assert camel(pascal("getPetById")) == camel(pascal("getPetById")) == "getPetById"

    def test_empty(self):
        assert pascal("") == ""
        assert camel("") == ""

    def test_kebab(self):
        assert kebab("Swagger Petstore") == "swagger-petstore"


class TestRoutes:
    """Test route template helpers."""

    def test_params_in_path(self):
        assert params_in_path("/users/{userId}/pets/{petId}") == ["userId", "petId"]

    def test_no_params(self):
        assert params_in_path("/pet") == []

    def test_template_route(self):
        assert to_template_route("/pet/{id}/photos") == "/pet/${id}/photos"

    def test_trailing_placeholder(self):
        assert trailing_placeholder("/pet/{id}") == "id"

    def test_no_trailing_placeholder(self):
        assert trailing_placeholder("/pet/{id}/photos") is None

    def test_strip_trailing_placeholder(self):
        assert strip_trailing_placeholder("/pet/{id}") == "/pet"
        assert strip_trailing_placeholder("/pet/{id}/photos") == "/pet/{id}/photos"


class TestNonIdentifierPlaceholders:
    """Test placeholders that are not valid TypeScript identifiers."""

    def test_params_in_path_keeps_raw_name(self):
        assert params_in_path("/pets/{pet-id}/photos/{photo.id}") == ["pet-id", "photo.id"]

    def test_template_route_uses_argument_name(self):
        assert to_template_route("/pets/{pet-id}/photos") == "/pets/${petId}/photos"

    def test_trailing_hyphenated_placeholder(self):
        assert trailing_placeholder("/pets/{pet-id}") == "pet-id"
        assert strip_trailing_placeholder("/pets/{pet-id}") == "/pets"

    def test_argument_name(self):
        assert argument_name("id") == "id"
        assert argument_name("user_id") == "user_id"
        assert argument_name("pet-id") == "petId"

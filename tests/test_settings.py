import pytest
from jsonapi_openapi_lint.settings import ResolverSettings
from pydantic import ValidationError


def test_defaults():
    settings = ResolverSettings()
    assert settings.definitions_prefix == "#/components/"
    assert settings.prune_definitions is True
    assert settings.merge_siblings is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("JSONAPI_LINT_DEFINITIONS_PREFIX", "#/definitions/")
    monkeypatch.setenv("JSONAPI_LINT_PRUNE_DEFINITIONS", "false")
    monkeypatch.setenv("JSONAPI_LINT_MERGE_SIBLINGS", "true")

    settings = ResolverSettings()

    assert settings.definitions_prefix == "#/definitions/"
    assert settings.prune_definitions is False
    assert settings.merge_siblings is True


def test_init_arguments_take_precedence(monkeypatch):
    monkeypatch.setenv("JSONAPI_LINT_MERGE_SIBLINGS", "true")
    assert ResolverSettings(merge_siblings=False).merge_siblings is False


@pytest.mark.parametrize("prefix", ["components/", "/components/", "#components", ""])
def test_invalid_definitions_prefix(prefix):
    with pytest.raises(ValidationError, match="Must be a local pointer prefix"):
        ResolverSettings(definitions_prefix=prefix)


def test_invalid_boolean_from_environment(monkeypatch):
    monkeypatch.setenv("JSONAPI_LINT_PRUNE_DEFINITIONS", "sometimes")
    with pytest.raises(ValidationError):
        ResolverSettings()

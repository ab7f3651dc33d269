"""Tests for environment detection, settings and interceptor construction."""

import pytest
from pydantic import ValidationError

from api_error_middleware.core import Environment, make_interceptor
from api_error_middleware.core.classifiers import RequestValidationClassifier
from api_error_middleware.core.classifiers.database import (
    IntegrityErrorClassifier,
    ModelNotFoundClassifier,
)
from api_error_middleware.core.config_loader import get_current_environment, get_env_files
from api_error_middleware.core.exceptions import DebuggableError
from api_error_middleware.main_config import Settings


@pytest.mark.parametrize(
    ("environment", "is_release"),
    [
        (Environment.LOCAL, False),
        (Environment.DEV, False),
        (Environment.UAT, False),
        (Environment.PREPROD, True),
        (Environment.PROD, True),
    ],
)
def test_release_environments(environment: Environment, is_release: bool) -> None:
    assert environment.is_release is is_release
    assert Settings(env=environment).is_release is is_release


def test_current_environment_from_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "prod")
    assert get_current_environment() is Environment.PROD

    monkeypatch.setenv("ENV", "staging")
    assert get_current_environment() is Environment.LOCAL


def test_env_files_load_base_first(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "dev")

    base, specific = get_env_files()

    assert base.endswith(".env_base")
    assert specific.endswith(".env_dev")


def test_local_override_only_applies_locally(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "dev")
    assert get_env_files(Environment.PROD)[1].endswith(".env_dev")

    monkeypatch.setenv("ENV", "local")
    assert get_env_files(Environment.PROD)[1].endswith(".env_prod")


def test_settings_read_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "preprod")

    assert Settings().env is Environment.PREPROD


def test_debug_forbidden_in_production() -> None:
    with pytest.raises(ValidationError):
        Settings(env=Environment.PROD, debug=True)


def test_make_interceptor_defaults() -> None:
    interceptor = make_interceptor(Settings(env=Environment.PROD))

    assert interceptor.environment is Environment.PROD
    assert [type(c) for c in interceptor.registry.classifiers] == [
        ModelNotFoundClassifier,
        IntegrityErrorClassifier,
        RequestValidationClassifier,
    ]


def test_make_interceptor_respects_environment() -> None:
    failure = DebuggableError(identifier="x", reason="secret", message="public")

    dev = make_interceptor(Settings(env=Environment.DEV), classifiers=[])
    prod = make_interceptor(Settings(env=Environment.PROD), classifiers=[])

    assert len(dev.registry) == 0
    assert dev.build_response(failure, None).status_code == 500
    assert prod.build_response(failure, None).body == b'{"error":"public"}'


def test_environment_name_is_normalised(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "  PROD ")
    assert get_current_environment() is Environment.PROD

    monkeypatch.delenv("ENV")
    assert get_current_environment() is Environment.LOCAL


def test_env_files_from_custom_directory(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("ENV", "uat")

    assert get_env_files(env_dir=tmp_path) == [str(tmp_path / ".env_base"), str(tmp_path / ".env_uat")]


def test_settings_read_env_files(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.delenv("ENV", raising=False)
    (tmp_path / ".env_base").write_text("ENV=dev\n")

    settings = Settings(_env_file=get_env_files(env_dir=tmp_path))

    assert settings.env is Environment.DEV

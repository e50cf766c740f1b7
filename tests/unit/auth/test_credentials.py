"""Tests for multi-source credential resolution."""

import logging
import os

import pytest

from garoon_rest.auth import CredentialResolver
from garoon_rest.auth.exceptions import CredentialFileError, CredentialNotFoundError


class TestCredentialResolverInit:
    """Test CredentialResolver initialization."""

    def test_init_default(self):
        resolver = CredentialResolver()
        assert resolver._dotenv_loaded

    def test_init_skip_dotenv(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_dotenv_values_reach_environment(self, tmp_path):
        """Values in a .env file are resolvable like environment variables."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("GAROON_USERNAME=from-dotenv\n")

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        try:
            assert resolver.resolve(env_var_name="GAROON_USERNAME") == "from-dotenv"
        finally:
            # load_dotenv writes straight into os.environ
            os.environ.pop("GAROON_USERNAME", None)

    def test_dotenv_path_that_is_a_directory(self, tmp_path):
        dotenv_path = tmp_path / "not_a_file"
        dotenv_path.mkdir()

        resolver = CredentialResolver(dotenv_path=str(dotenv_path))

        assert resolver._dotenv_loaded is True
        assert resolver.resolve(value="works") == "works"


class TestCredentialResolverResolve:
    """Test credential resolution and priority ordering."""

    def test_resolve_from_explicit_value(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert resolver.resolve(value="explicit-value-123") == "explicit-value-123"

    def test_resolve_from_environment_variable(self, monkeypatch):
        monkeypatch.setenv("GAROON_PASSWORD", "env-value-456")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="GAROON_PASSWORD") == "env-value-456"

    def test_explicit_value_overrides_all(self, monkeypatch):
        monkeypatch.setenv("GAROON_PASSWORD", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-value", env_var_name="GAROON_PASSWORD", default="default-value")

        assert result == "explicit-value"

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("GAROON_PASSWORD", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="GAROON_PASSWORD", default="default-value") == "env-value"

    def test_default_used_when_nothing_else_set(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert resolver.resolve(env_var_name="NONEXISTENT_VAR", default="default-value") == "default-value"

    def test_resolve_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert resolver.resolve(env_var_name="NONEXISTENT_VAR") is None

    def test_resolve_raises_when_required_and_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="NONEXISTENT_VAR", required=True)

        assert "Required credential not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "NONEXISTENT_VAR"


class TestSecretFileFallback:
    """``<ENV_VAR>_FILE`` names a file holding the credential."""

    def test_file_variable_is_used_when_variable_unset(self, tmp_path, monkeypatch):
        secret = tmp_path / "garoon_password"
        secret.write_text("  from-secret-file \n")
        monkeypatch.setenv("GAROON_PASSWORD_FILE", str(secret))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="GAROON_PASSWORD") == "from-secret-file"

    def test_variable_wins_over_file_variable(self, tmp_path, monkeypatch):
        secret = tmp_path / "garoon_password"
        secret.write_text("from-secret-file")
        monkeypatch.setenv("GAROON_PASSWORD", "from-env")
        monkeypatch.setenv("GAROON_PASSWORD_FILE", str(secret))
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="GAROON_PASSWORD") == "from-env"

    def test_missing_secret_file_is_an_error(self, tmp_path, monkeypatch):
        monkeypatch.setenv("GAROON_PASSWORD_FILE", str(tmp_path / "missing"))
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialFileError):
            resolver.resolve(env_var_name="GAROON_PASSWORD")


class TestCredentialResolverFromFile:
    """Test file-based credential resolution."""

    def test_resolve_from_file_with_explicit_path(self, tmp_path):
        cred_file = tmp_path / "token.txt"
        cred_file.write_text("  file-credential-abc123  \n")

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(cred_file)) == "file-credential-abc123"

    def test_resolve_from_file_with_tilde_expansion(self, tmp_path, monkeypatch):
        fake_home = tmp_path / "home"
        cred_file = fake_home / ".config" / "garoon_token"
        cred_file.parent.mkdir(parents=True)
        cred_file.write_text("home-dir-credential")
        monkeypatch.setenv("HOME", str(fake_home))

        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="~/.config/garoon_token") == "home-dir-credential"

    def test_resolve_from_file_returns_none_when_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert resolver.resolve_from_file(file_path="/nonexistent/path/to/file.txt") is None

    def test_resolve_from_file_raises_when_required_and_not_found(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialFileError) as exc_info:
            resolver.resolve_from_file(file_path="/nonexistent/path/to/file.txt", required=True)

        assert "not found" in str(exc_info.value)

    def test_resolve_from_file_with_directory(self, tmp_path):
        not_a_file = tmp_path / "dir_not_file"
        not_a_file.mkdir()
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(not_a_file)) is None
        with pytest.raises(CredentialFileError):
            resolver.resolve_from_file(file_path=str(not_a_file), required=True)

    def test_resolve_from_file_no_path_provided_required(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialFileError) as exc_info:
            resolver.resolve_from_file(required=True)

        assert "No file path provided" in str(exc_info.value)


class TestCredentialMasking:
    """Test credential masking in logs."""

    def test_credential_value_is_masked_in_debug_logs(self, caplog):
        caplog.set_level(logging.DEBUG)

        CredentialResolver(load_dotenv=False).resolve(value="super-secret-key-123")

        assert "super-secret-key-123" not in caplog.text
        assert "***" in caplog.text

    def test_credential_masking_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG)

        CredentialResolver(load_dotenv=False).resolve(value="https://example.cybozu.com/g", mask_in_logs=False)

        assert "https://example.cybozu.com/g" in caplog.text

    def test_file_credentials_are_masked(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG)
        cred_file = tmp_path / "secret.txt"
        cred_file.write_text("file-secret-xyz")

        CredentialResolver(load_dotenv=False).resolve_from_file(file_path=str(cred_file))

        assert "file-secret-xyz" not in caplog.text
        assert "***" in caplog.text

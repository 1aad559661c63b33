"""
Tests for environment placeholder expansion in connection strings.

Tests the $NAME syntax: single pass, unset names become empty,
ASCII word characters only, and the injected lookup.
"""
import os
from unittest.mock import patch

import pytest

from policy_adapter.utils.config import interpolate_env, load_configuration
from tests.fixtures.fake_builders import env_lookup


@pytest.mark.unit
class TestInterpolateEnv:
    """Test placeholder substitution."""

    def test_set_and_unset_variables(self):
        """Test the documented host/user example."""
        result = interpolate_env("host=$HOST;user=$USER", env_lookup({"HOST": "db1"}))
        assert result == "host=db1;user="

    def test_no_placeholders(self):
        """Test that plain text passes through."""
        assert interpolate_env("sqlite:///casbin.db", env_lookup({})) == "sqlite:///casbin.db"

    def test_empty_string(self):
        assert interpolate_env("", env_lookup({"A": "1"})) == ""

    def test_token_stops_at_non_word_character(self):
        """Test that the name ends at the first non-word character."""
        lookup = env_lookup({"DB_USER": "alice", "DB": "wrong"})
        assert interpolate_env("$DB_USER@host", lookup) == "alice@host"

    def test_adjacent_placeholders(self):
        """Test placeholders with nothing between them."""
        lookup = env_lookup({"A": "x", "B": "y"})
        assert interpolate_env("$A$B", lookup) == "xy"

    def test_digits_are_word_characters(self):
        lookup = env_lookup({"PORT5432": "ok", "1": "one"})
        assert interpolate_env("$PORT5432/$1", lookup) == "ok/one"

    def test_bare_dollar_resolves_empty_name(self):
        """Test that a lone $ matches the empty name and is removed."""
        assert interpolate_env("cost$ only", env_lookup({})) == "cost only"
        assert interpolate_env("trailing$", env_lookup({})) == "trailing"

    def test_bare_dollar_uses_empty_name_lookup(self):
        """Test that the empty name is looked up like any other."""
        assert interpolate_env("a$-b", env_lookup({"": "X"})) == "aX-b"

    def test_substitution_is_not_recursive(self):
        """Test that substituted values are not scanned again."""
        lookup = env_lookup({"OUTER": "$INNER", "INNER": "secret"})
        assert interpolate_env("pw=$OUTER", lookup) == "pw=$INNER"

    def test_non_ascii_letters_end_the_token(self):
        """Test that only ASCII letters, digits and underscore form a name."""
        lookup = env_lookup({"NAME": "v"})
        assert interpolate_env("$NAMEé", lookup) == "vé"

    def test_process_environment_is_default_lookup(self):
        """Test that os.environ is used when no lookup is injected."""
        with patch.dict(os.environ, {"PA_TEST_HOST": "db9"}):
            assert interpolate_env("host=$PA_TEST_HOST") == "host=db9"


@pytest.mark.unit
class TestConfigInterpolation:
    """Test expansion during config loading."""

    def test_connection_expanded_from_lookup(self, write_config):
        path = write_config({"Driver": "postgres", "Connection": "postgresql://$U:$P@$H/app"})
        config = load_configuration(str(path), env_lookup({"U": "app", "P": "pw", "H": "pg1"}))
        assert config.connection == "postgresql://app:pw@pg1/app"

    def test_unset_variables_expand_to_empty(self, write_config):
        path = write_config({"Connection": "$MISSING_USER@host/"})
        config = load_configuration(str(path), env_lookup({}))
        assert config.connection == "@host/"

    def test_env_values_from_process(self, write_config):
        """Test expansion with real environment variables."""
        path = write_config({"Connection": "$PA_TEST_DSN"})
        with patch.dict(os.environ, {"PA_TEST_DSN": "root:pw@tcp/"}):
            config = load_configuration(str(path))
        assert config.connection == "root:pw@tcp/"

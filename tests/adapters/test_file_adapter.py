"""
File adapter builder tests.

Tests that the bundled builder returns casbin's policy file adapter
pointing at the requested path.
"""

import pytest
from casbin.persist.adapters import FileAdapter

from policy_adapter.factories.adapters.file_adapter import CasbinFileAdapterBuilder
from policy_adapter.factories.adapters.persistence_adapter import FileAdapterBuilder


@pytest.mark.unit
class TestCasbinFileAdapterBuilder:
    """Test CasbinFileAdapterBuilder."""

    def test_is_file_builder(self):
        assert isinstance(CasbinFileAdapterBuilder(), FileAdapterBuilder)

    def test_builds_file_adapter(self, tmp_path):
        policy_file = tmp_path / "rbac_policy.csv"
        policy_file.write_text("p, alice, data1, read\n", encoding='utf-8')

        adapter = CasbinFileAdapterBuilder().build(str(policy_file))
        assert isinstance(adapter, FileAdapter)
        assert adapter._file_path == str(policy_file)

    def test_missing_file_is_not_checked_at_build(self, tmp_path):
        """Test that construction does not open the policy file."""
        adapter = CasbinFileAdapterBuilder().build(str(tmp_path / "absent.csv"))
        assert isinstance(adapter, FileAdapter)

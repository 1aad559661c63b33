import logging

from casbin.persist.adapters import FileAdapter

from policy_adapter.factories.adapters.persistence_adapter import FileAdapterBuilder


class CasbinFileAdapterBuilder(FileAdapterBuilder):
    """Builds casbin's CSV policy file adapter."""

    def build(self, path):
        logging.debug("Building file adapter for %s", path)
        return FileAdapter(path)

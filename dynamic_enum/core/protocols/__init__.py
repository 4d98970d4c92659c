"""Core protocols."""

from dynamic_enum.core.protocols.data_source import DataSourceProtocol, DataSourceRecord
from dynamic_enum.core.protocols.registry import RegistryProtocol

__all__ = ["DataSourceProtocol", "DataSourceRecord", "RegistryProtocol"]

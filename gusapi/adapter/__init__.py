"""Registry adapters."""

from .ports import IRegistryAdapter
from .soap import ResultNode, SoapAdapter

__all__ = ["IRegistryAdapter", "ResultNode", "SoapAdapter"]

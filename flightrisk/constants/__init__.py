from .providers import ProviderConstants
from .risk import RiskConstants, UnitConversions

__all__ = ["ProviderConstants", "RiskConstants", "UnitConversions"]

"""explorerQL validation layer."""
from explorerql.validate.validator import PropertiesValidator

__all__ = ["PropertiesValidator"]

from .loader import load_config
from .models import AnalysisConfig

__all__ = ["AnalysisConfig", "load_config"]

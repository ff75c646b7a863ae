"""Registry bootstrap (import side-effect)."""
from .api import set_registries
from .bootstrap import build_registries

set_registries(*build_registries())

from .lexis_view import LexisView
from .gender_bar_view import GenderBarView
from .scatter_view import ScatterView

__all__ = ["LexisView", "GenderBarView", "ScatterView"]

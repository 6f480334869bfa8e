from .bootstrap import AppBootstrap
from .navigation import TAB_ORDER, NavigationState, Tab

__all__ = ["AppBootstrap", "NavigationState", "TAB_ORDER", "Tab"]

"""Reference functionality: identity-carrying cells and the aliasing tracker."""

from graphcopy.core.reference.models import Ref
from graphcopy.core.reference.tracker import AliasTracker

__all__ = [
    "Ref",
    "AliasTracker",
]

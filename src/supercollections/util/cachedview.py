from collections.abc import Collection
from supercollections.util.features import cache_checks_enabled
import warnings


def is_view_current(view: list, live: Collection, view_name: str) -> bool:
    """
    Returns whether a cached list view still matches the live container
    it was materialized from.
    
    Normally only the length is compared. When cache checks are enabled
    every element is compared by identity and a RuntimeWarning is issued
    for any stale view that is detected.
    """
    if len(view) != len(live):
        stale = True
    elif cache_checks_enabled():
        stale = any(v is not x for (v, x) in zip(view, live))
    else:
        return True
    
    if stale and cache_checks_enabled():
        warnings.warn(
            f'Cached {view_name} view was stale and has been rebuilt. '
            f'The container was probably mutated without invalidating its caches.',
            category=RuntimeWarning,
            stacklevel=3)
    return not stale

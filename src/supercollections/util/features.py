from collections.abc import Iterator
from contextlib import contextmanager


# ------------------------------------------------------------------------------
# Specific Features

def cache_checks_enabled() -> bool:
    """
    Returns whether derived-view caches are verified against the live
    container on every read, rather than only by length.
    """
    return _is_feature_enabled('CacheChecks')


def set_cache_checks_enabled(value: bool) -> None:
    _set_feature_enabled('CacheChecks', value)


@contextmanager
def cache_checks(enabled: bool=True) -> Iterator[None]:
    """
    Context in which cache coherence checks are temporarily enabled
    (or disabled).
    
    Useful while running automated tests.
    
    Example:
        with cache_checks():
            assert m.array() == [1, 2, 3]
    """
    with _feature_set_to('CacheChecks', enabled):
        yield


# ------------------------------------------------------------------------------
# General Features

_enabled_features = set()  # type: set[str]


def _is_feature_enabled(feature_name: str) -> bool:
    return feature_name in _enabled_features


def _set_feature_enabled(feature_name: str, value: bool) -> None:
    if value:
        _enabled_features.add(feature_name)
    else:
        _enabled_features.discard(feature_name)


@contextmanager
def _feature_set_to(feature_name: str, value: bool) -> Iterator[None]:
    was_enabled = feature_name in _enabled_features
    _set_feature_enabled(feature_name, value)
    try:
        yield
    finally:
        _set_feature_enabled(feature_name, was_enabled)


# ------------------------------------------------------------------------------

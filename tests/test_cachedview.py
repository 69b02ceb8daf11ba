"""
Unit tests for supercollections.util.cachedview and
supercollections.util.features modules.
"""

import pytest
from supercollections import OrderedMap, OrderedSet
from supercollections.util.features import (
    cache_checks, cache_checks_enabled, set_cache_checks_enabled,
)
import warnings


class TestCacheChecksFeature:
    """Tests for the cache checks feature flag."""
    
    def test_is_disabled_by_default(self) -> None:
        assert not cache_checks_enabled()
    
    def test_context_enables_and_restores(self) -> None:
        with cache_checks():
            assert cache_checks_enabled()
            with cache_checks(False):
                assert not cache_checks_enabled()
            assert cache_checks_enabled()
        assert not cache_checks_enabled()
    
    def test_context_restores_after_error(self) -> None:
        with pytest.raises(ValueError):
            with cache_checks():
                raise ValueError()
        assert not cache_checks_enabled()
    
    def test_can_set_directly(self) -> None:
        set_cache_checks_enabled(True)
        try:
            assert cache_checks_enabled()
        finally:
            set_cache_checks_enabled(False)
        assert not cache_checks_enabled()


class TestStaleViewDetection:
    """Tests for detection of cached views that bypassed invalidation."""
    
    def test_view_with_wrong_length_is_rebuilt_silently(self) -> None:
        m = OrderedMap([('a', 1), ('b', 2)])
        m.array()
        m._array = [1]  # simulate a mutation that skipped invalidation
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            assert m.array() == [1, 2]
    
    def test_view_with_wrong_contents_is_rebuilt_and_reported_when_checks_enabled(self) -> None:
        m = OrderedMap([('a', 1), ('b', 2)])
        m.key_array()
        m._key_array = ['a', 'z']  # simulate a mutation that skipped invalidation
        with cache_checks():
            with pytest.warns(RuntimeWarning, match='stale'):
                assert m.key_array() == ['a', 'b']
            
            # Rebuilt view is current, so no further warning
            with warnings.catch_warnings():
                warnings.simplefilter('error')
                assert m.key_array() == ['a', 'b']
    
    def test_set_view_with_wrong_contents_is_reported_when_checks_enabled(self) -> None:
        s = OrderedSet([1, 2, 3])
        s.array()
        s._array = [1, 2, 4]  # simulate a mutation that skipped invalidation
        with cache_checks():
            with pytest.warns(RuntimeWarning, match='stale'):
                assert s.array() == [1, 2, 3]
    
    def test_current_view_is_reused_when_checks_enabled(self) -> None:
        m = OrderedMap([('a', 1), ('b', 2)])
        with cache_checks():
            with warnings.catch_warnings():
                warnings.simplefilter('error')
                array = m.array()
                assert m.array() is array
                m.set('c', 3)
                assert m.array() == [1, 2, 3]

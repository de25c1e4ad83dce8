"""
Unit tests for host platform classification.

Tests the ordered pattern table, the compute-once platform cache and
host identifier lookup.
"""

import threading
import time

import pytest
from unittest.mock import Mock, patch

from namewise.host import (
    PlatformFamily,
    PlatformCache,
    classify_platform,
    current_platform,
    get_platform_cache,
    host_identifier,
    is_windows,
    is_macosx,
    is_linux,
    is_unix,
)
from namewise.utils.config import NamewiseConfig, set_config
from namewise.utils.exceptions import UnknownPlatformError


class TestClassifyPlatform:
    """Test classification of raw identifiers."""

    @pytest.mark.parametrize("identifier,family", [
        ("x86_64-linux-gnu", PlatformFamily.LINUX),
        ("x86_64-pc-linux-gnu", PlatformFamily.LINUX),
        ("i386-mingw32", PlatformFamily.WINDOWS),
        ("mswin32", PlatformFamily.WINDOWS),
        ("x86_64-pc-cygwin", PlatformFamily.WINDOWS),
        ("x86_64-pc-msys", PlatformFamily.WINDOWS),
        ("x86_64-darwin19", PlatformFamily.MACOSX),
        ("Mac OS X", PlatformFamily.MACOSX),
        ("amd64-freebsd", PlatformFamily.UNIX),
        ("sparc-sun-solaris2.10", PlatformFamily.UNIX),
        ("x86_64-unknown-openbsd7.3", PlatformFamily.UNIX),
    ])
    def test_known_identifiers(self, identifier, family):
        assert classify_platform(identifier) is family

    def test_case_insensitive(self):
        assert classify_platform("Darwin") is PlatformFamily.MACOSX
        assert classify_platform("LINUX") is PlatformFamily.LINUX

    def test_first_matching_family_wins(self):
        """Windows patterns are checked before linux ones."""
        assert classify_platform("mingw-on-linux") is PlatformFamily.WINDOWS

    def test_unknown_identifier(self):
        with pytest.raises(UnknownPlatformError) as exc_info:
            classify_platform("plan9")

        assert exc_info.value.identifier == "plan9"
        assert "plan9" in str(exc_info.value)

    def test_unknown_identifier_is_logged(self):
        with patch("namewise.host.classifier._log") as mock_log:
            with pytest.raises(UnknownPlatformError):
                classify_platform("haiku")
        mock_log.log_platform_unknown.assert_called_once_with("haiku")

    def test_family_string_form(self):
        assert str(PlatformFamily.MACOSX) == "macosx"


class TestPlatformCache:
    """Test the compute-once platform cache."""

    def test_classifies_on_first_use(self):
        source = Mock(return_value="x86_64-linux-gnu")
        cache = PlatformCache(source)

        assert not cache.is_set()
        assert cache.get() is PlatformFamily.LINUX
        assert cache.is_set()
        assert cache.identifier == "x86_64-linux-gnu"

    def test_result_is_memoized(self):
        source = Mock(return_value="x86_64-darwin19")
        cache = PlatformCache(source)

        for _ in range(3):
            assert cache.get() is PlatformFamily.MACOSX
        assert source.call_count == 1

    def test_failure_is_not_memoized(self):
        source = Mock(side_effect=["plan9", "x86_64-linux-gnu"])
        cache = PlatformCache(source)

        with pytest.raises(UnknownPlatformError):
            cache.get()
        assert not cache.is_set()

        assert cache.get() is PlatformFamily.LINUX
        assert source.call_count == 2

    def test_reset(self):
        source = Mock(side_effect=["i386-mingw32", "amd64-freebsd"])
        cache = PlatformCache(source)

        assert cache.get() is PlatformFamily.WINDOWS
        cache.reset()
        assert cache.identifier is None
        assert cache.get() is PlatformFamily.UNIX

    def test_memoize_disabled(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"platform": {"memoize": false}}')
        set_config(NamewiseConfig(str(config_file)))

        source = Mock(return_value="x86_64-linux-gnu")
        cache = PlatformCache(source)
        cache.get()
        cache.get()

        assert source.call_count == 2
        assert not cache.is_set()

    def test_concurrent_first_access(self):
        """Concurrent first callers classify the host once."""
        def slow_source():
            time.sleep(0.05)
            return "x86_64-linux-gnu"

        source = Mock(side_effect=slow_source)
        cache = PlatformCache(source)
        results = []

        threads = [threading.Thread(target=lambda: results.append(cache.get())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [PlatformFamily.LINUX] * 8
        assert source.call_count == 1

    def test_detection_is_logged(self):
        cache = PlatformCache(lambda: "x86_64-linux-gnu")
        with patch("namewise.host.classifier._log") as mock_log:
            cache.get()
        mock_log.log_platform_detected.assert_called_once_with("x86_64-linux-gnu", "linux")


class TestHostIdentifier:
    """Test host identifier lookup."""

    def test_environment_override(self, host_os):
        host_os("i386-mingw32")
        assert host_identifier() == "i386-mingw32"

    def test_config_file_value(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text('{"platform": {"host_os": "sparc-sun-solaris2.10"}}')
        set_config(NamewiseConfig(str(config_file)))

        assert host_identifier() == "sparc-sun-solaris2.10"

    def test_build_triple(self):
        with patch("namewise.host.identifier.sysconfig.get_config_var", return_value="x86_64-pc-linux-gnu"):
            assert host_identifier() == "x86_64-pc-linux-gnu"

    def test_native_windows_alias(self):
        with patch("namewise.host.identifier.sysconfig.get_config_var", return_value=None):
            with patch("namewise.host.identifier.sys", Mock(platform="win32")):
                assert host_identifier() == "mswin32"

    def test_sys_platform_fallback(self):
        with patch("namewise.host.identifier.sysconfig.get_config_var", return_value=None):
            with patch("namewise.host.identifier.sys", Mock(platform="darwin")):
                assert host_identifier() == "darwin"


class TestCurrentPlatform:
    """Test the process-wide platform helpers."""

    @pytest.mark.parametrize("identifier,family,predicate", [
        ("x86_64-linux-gnu", PlatformFamily.LINUX, is_linux),
        ("i386-mingw32", PlatformFamily.WINDOWS, is_windows),
        ("x86_64-darwin19", PlatformFamily.MACOSX, is_macosx),
        ("amd64-freebsd", PlatformFamily.UNIX, is_unix),
    ])
    def test_current_platform(self, host_os, identifier, family, predicate):
        host_os(identifier)

        assert current_platform() is family
        assert predicate() is True
        assert get_platform_cache().identifier == identifier

    def test_current_platform_unknown(self, host_os):
        host_os("plan9")

        with pytest.raises(UnknownPlatformError, match="plan9"):
            current_platform()
        assert not get_platform_cache().is_set()

    def test_current_platform_is_cached(self, host_os):
        host_os("x86_64-linux-gnu")
        assert current_platform() is PlatformFamily.LINUX

        with patch("namewise.host.classifier.classify_platform") as mock_classify:
            assert current_platform() is PlatformFamily.LINUX
            mock_classify.assert_not_called()

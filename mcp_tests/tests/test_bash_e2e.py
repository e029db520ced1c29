"""End-to-end checks against the bash installed on this machine."""

import shutil
import subprocess

import pytest

from clients.bash_client import BashClient
from core.errors import EvaluationError
from matching.matcher import BashMatcher

pytestmark = pytest.mark.skipif(shutil.which("bash") is None, reason="bash is not installed")


@pytest.fixture
def matcher():
    return BashMatcher(executor=BashClient(timeout=10))


def test_literal_patterns(matcher):
    assert matcher.match("foo", "foo") is True
    assert matcher.match("foo", "bar") is False


def test_wildcards(matcher):
    assert matcher.match("foo", "f*") is True
    assert matcher.match("foo", "b*") is False
    assert matcher.match("foo", "f?o") is True
    assert matcher.match("foo", "[a-f]oo") is True


def test_case_sensitivity(matcher):
    assert matcher.match("FOO", "foo") is False
    assert matcher.match("FOO", "foo", {"nocase": True}) is True


def test_extglob_is_inferred(matcher):
    assert matcher.match("foo", "@(foo|bar)") is True
    assert matcher.match("baz", "@(foo|bar)") is False
    assert matcher.match("baz", "!(foo|bar)") is True


def test_globstar_is_inferred_and_accepted_by_bash(matcher):
    # [[ ]] lets * cross "/" anyway, so check the flag reaches bash too
    assert matcher.compile("a/b/c.js", "**/*.js")[:2] == ["-O", "globstar"]
    assert matcher.match("a/b/c.js", "**/*.js") is True


def test_match_all(matcher):
    assert matcher.match_all(["foo", "bar", "baz"], "b*") == ["bar", "baz"]


def test_syntax_error_policy(matcher):
    assert matcher.match("foo", "foo)") is False
    with pytest.raises(EvaluationError):
        matcher.match("foo", "foo)", {"strict_errors": True})


def _bash_version():
    out = subprocess.run(
        ["bash", "-c", 'echo "${BASH_VERSINFO[0]}.${BASH_VERSINFO[1]}"'],
        capture_output=True,
        text=True,
        check=True,
    )
    major, minor = out.stdout.strip().split(".")
    return int(major), int(minor)


def test_dotglob_matches_leading_dot(matcher):
    assert matcher.compile(".hidden", "*", {"dot": True})[:2] == ["-O", "dotglob"]
    assert matcher.match(".hidden", "*", {"dotglob": True}) is True
    assert matcher.match(".hidden", "*", {"dot": True}) is True


def test_leading_dot_without_dotglob(matcher):
    # [[ ]] pattern matching never treats a leading dot or "/" specially;
    # dotglob only changes filename expansion (observed on bash 5.2.15)
    version = _bash_version()
    if version < (4, 0):
        pytest.skip(f"leading-dot behaviour not recorded for bash {version}")
    assert matcher.match(".hidden", "*") is True, f"bash {version}"
    assert matcher.match("a/b", "*") is True, f"bash {version}"


def test_nullglob_is_accepted_by_bash(matcher):
    assert matcher.compile("foo", "b*", {"nonull": True})[:2] == ["-O", "nullglob"]
    assert matcher.match("foo", "b*", {"nullglob": True, "strict_errors": True}) is False
    assert matcher.match("foo", "f*", {"nullglob": True, "strict_errors": True}) is True


def test_failglob_is_accepted_by_bash(matcher):
    assert matcher.compile("foo", "f*", {"failglob": True})[:2] == ["-O", "failglob"]
    assert matcher.match("foo", "f*", {"failglob": True, "strict_errors": True}) is True
    assert matcher.match("foo", "b*", {"failglob": True, "strict_errors": True}) is False


def test_empty_pattern_is_a_bash_syntax_error(matcher):
    assert matcher.match("", "") is False
    with pytest.raises(EvaluationError):
        matcher.match("", "", {"strict_errors": True})

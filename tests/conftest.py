import logging

import pytest

from dnsalter.alterations.state import MutationState

# ---- env isolation ----------------------------------------------------------

_ENV_KEYS = (
    "DNSALTER_MIN_FOR_WORD_FLIP",
    "DNSALTER_EDIT_DISTANCE",
    "DNSALTER_WORDLIST",
    "DNSALTER_WORKERS",
    "DNSALTER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """
    Drop any DNSALTER_* values picked up from the shell or a local .env so
    tests always start from the documented defaults.
    """
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_pkg_logger():
    # The CLI attaches a handler and sets a level on the package logger.
    pkg = logging.getLogger("dnsalter")
    handlers, level = list(pkg.handlers), pkg.level
    yield
    pkg.handlers[:] = handlers
    pkg.setLevel(level)


# =============================================================================
# STATE FIXTURES
# =============================================================================


@pytest.fixture
def make_state():
    """Factory: make_state(words, min_for_word_flip=1, edit_distance=1)."""

    def _make(words=(), *, min_for_word_flip=1, edit_distance=1):
        return MutationState(
            words,
            min_for_word_flip=min_for_word_flip,
            edit_distance=edit_distance,
        )

    return _make


@pytest.fixture
def state(make_state):
    """Empty vocabulary, threshold 1: only words seen this run qualify."""
    return make_state()


@pytest.fixture
def seeded_state(make_state):
    """Seeded vocabulary, threshold 0: every seed word qualifies immediately."""
    return make_state(["dev", "prod", "api"], min_for_word_flip=0)

"""Tests for the candidate decision engine."""

import re

import pytest

from commitguard.config.loader import ConfigError
from commitguard.config.schema import CommitGuardConfig
from commitguard.findings.models import Candidate, Classification
from commitguard.scanner.classifier import Classifier

from tests.conftest import AWS_KEY, HIGH_ENTROPY_BLOB, LOW_ENTROPY_BLOB, PEM_HEADER


def _candidate(text, line=None):
    return Candidate(text=text, source="app.py", rule_id="TEST", line_no=1, line=line or text)


@pytest.fixture
def classifier():
    return Classifier()


class TestClassify:
    def test_high_confidence(self, classifier):
        finding = classifier.classify(_candidate(AWS_KEY, f'aws = "{AWS_KEY}"'))
        assert finding.classification is Classification.HIGH_CONFIDENCE
        assert finding.entropy == 0

    def test_pem_is_high_confidence(self, classifier):
        assert classifier.classify(_candidate(PEM_HEADER)).classification is Classification.HIGH_CONFIDENCE

    def test_entropy_flagged(self, classifier):
        finding = classifier.classify(_candidate(HIGH_ENTROPY_BLOB, f'blob = "{HIGH_ENTROPY_BLOB}"'))
        assert finding.classification is Classification.ENTROPY_FLAGGED
        assert finding.entropy == 40
        assert finding.classification.is_reported

    def test_entropy_clear(self, classifier):
        finding = classifier.classify(_candidate(LOW_ENTROPY_BLOB))
        assert finding.classification is Classification.ENTROPY_CLEAR
        assert finding.entropy == 1
        assert not finding.classification.is_reported

    def test_threshold_is_strict(self, classifier):
        # publishable key with exactly 8 distinct characters
        eight = "pk_live_" + "a" * 24
        assert classifier.classify(_candidate(eight)).classification is Classification.ENTROPY_CLEAR
        nine = "pk_live_" + "ab" * 12
        assert classifier.classify(_candidate(nine)).classification is Classification.ENTROPY_FLAGGED

    def test_allowlist_precedes_high_confidence(self, classifier):
        finding = classifier.classify(_candidate(AWS_KEY, f"API_KEY = {AWS_KEY}"))
        assert finding.classification is Classification.ALLOWLISTED

    def test_allowlist_looks_at_whole_line(self, classifier):
        finding = classifier.classify(_candidate(HIGH_ENTROPY_BLOB, f"{HIGH_ENTROPY_BLOB}  # example.com"))
        assert finding.classification is Classification.ALLOWLISTED

    def test_custom_threshold(self):
        classifier = Classifier(entropy_threshold=40)
        finding = classifier.classify(_candidate(HIGH_ENTROPY_BLOB))
        assert finding.classification is Classification.ENTROPY_CLEAR

    def test_extra_allowlist(self):
        classifier = Classifier(extra_allowlist=[re.compile("fixtures", re.IGNORECASE)])
        finding = classifier.classify(_candidate(AWS_KEY, f"FIXTURES['aws'] = '{AWS_KEY}'"))
        assert finding.classification is Classification.ALLOWLISTED


class TestFromConfig:
    def test_uses_scan_section(self):
        cfg = CommitGuardConfig()
        cfg.scan.entropy_threshold = 12
        assert Classifier.from_config(cfg).entropy_threshold == 12

    def test_allowlist_patterns_compiled(self):
        cfg = CommitGuardConfig()
        cfg.allowlist.patterns = ["dummy-value"]
        classifier = Classifier.from_config(cfg)
        finding = classifier.classify(_candidate(AWS_KEY, f"{AWS_KEY} DUMMY-VALUE"))
        assert finding.classification is Classification.ALLOWLISTED

    def test_invalid_allowlist_pattern(self):
        cfg = CommitGuardConfig()
        cfg.allowlist.patterns = ["("]
        with pytest.raises(ConfigError, match="allowlist"):
            Classifier.from_config(cfg)

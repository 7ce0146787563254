"""Scanner — sources, filters, classifier, engines."""

from commitguard.scanner.classifier import Classifier
from commitguard.scanner.engine import ScanError, scan_files, scan_text
from commitguard.scanner.entropy import entropy_score
from commitguard.scanner.message import scan_message

__all__ = [
    "Classifier",
    "ScanError",
    "entropy_score",
    "scan_files",
    "scan_message",
    "scan_text",
]

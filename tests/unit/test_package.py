import tnef_extractor
from tnef_extractor import TnefReader, TnefSummary, __version__


def test_version_available():
    assert isinstance(__version__, str) and __version__


def test_public_exports():
    assert TnefReader is tnef_extractor.tnef_reader.TnefReader
    assert set(tnef_extractor.__all__) >= {"TnefReader", "TnefError", "summarize_tnef", "iter_attributes"}


def test_summary_defaults():
    summary = TnefSummary(attachment_key=0)
    assert summary.attribute_count == 0
    assert summary.attachment_count == 0
    assert summary.subject is None

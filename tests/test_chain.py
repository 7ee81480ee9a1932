"""
Tests for detector/filename.py and detector/chain.py.
"""
import pytest
from detector.additions import Addition
from detector.chain import DetectorChain
from detector.config import DetectorConfig
from detector.content import FileContentDetector
from detector.filename import FileNameDetector, suspicious_reason
from detector.ignores import Ignores
from detector.results import DetectionResults

SECRET = "aB3dE5gH7jK9mN1pQ2rS4tU6vW8xY0z+/"


# ─── suspicious_reason ────────────────────────────────────────────────────────

@pytest.mark.parametrize("path,fragment", [
    (".env",                       ".env"),
    ("deploy/.env",                ".env"),
    ("certs/server.pem",           ".pem"),
    ("backup/vault.KDBX",          ".kdbx"),
    ("config/db_password.txt",     "password"),
    ("docs/Credentials.md",        "credentials"),
    (r"home\user\.ssh\id_rsa",     "id_rsa"),
])
def test_suspicious_reason_flags(path, fragment):
    reason = suspicious_reason(path)
    assert reason is not None
    assert path in reason
    assert fragment in reason


@pytest.mark.parametrize("path", [
    "src/app.py",
    "README.md",
    ".envrc",
    "keyboard.txt",
])
def test_suspicious_reason_clean(path):
    assert suspicious_reason(path) is None


def test_filename_detector_honours_ignores():
    results = DetectionResults()
    ignores = Ignores({"detectors": {"filename": ["*.pem"]}})
    FileNameDetector().test([Addition("certs/test.pem")], ignores, results)
    assert results.has_failures() is False
    assert "certs/test.pem" in results.ignores


# ─── DetectorChain ────────────────────────────────────────────────────────────

def test_default_chain_detectors():
    chain = DetectorChain.default()
    kinds = [type(d) for d in chain.detectors]
    assert kinds == [FileNameDetector, FileContentDetector]


def test_default_chain_aggressive():
    chain = DetectorChain.default(DetectorConfig(aggressive=True))
    assert chain.detectors[1].secondary is not None


def test_chain_collects_messages_from_each_detector():
    results = DetectionResults()
    DetectorChain.default().test([Addition(".env", f"KEY={SECRET}".encode())], Ignores(), results)
    messages = results.failures[".env"]
    assert len(messages) == 2
    assert messages[0].startswith('The file name ".env"')
    assert SECRET in messages[1]


def test_chain_global_ignore_recorded_once():
    results = DetectionResults()
    DetectorChain.default().test(
        [Addition("fixtures/.env", SECRET.encode())],
        Ignores.from_patterns(["fixtures/"]),
        results,
    )
    assert results.has_failures() is False
    assert results.ignores["fixtures/.env"] == ["fixtures/.env was ignored by .commitlensignore"]


def test_chain_creates_results_when_missing():
    results = DetectorChain.default().test([Addition("app.py", b"print('hi')")])
    assert results.successful() is True


def test_chain_accepts_generators():
    additions = (Addition(p, SECRET.encode()) for p in ["a.txt", "b.txt"])
    results = DetectorChain.default().test(additions)
    assert list(results.failures) == ["a.txt", "b.txt"]

"""
CommitLens detector chain — runs every detector over one set of additions.
"""
from detector.config import DetectorConfig
from detector.content import FileContentDetector
from detector.filename import FileNameDetector
from detector.ignores import Ignores
from detector.results import DetectionResults


class DetectorChain:
    def __init__(self, detectors):
        self.detectors = list(detectors)

    @classmethod
    def default(cls, config: DetectorConfig = None) -> "DetectorChain":
        config = config or DetectorConfig()
        return cls([FileNameDetector(), FileContentDetector.from_config(config)])

    def test(self, additions, ignores: Ignores = None, results: DetectionResults = None) -> DetectionResults:
        additions = list(additions)
        ignores = ignores or Ignores()
        results = results if results is not None else DetectionResults()
        for detector in self.detectors:
            detector.test(additions, ignores, results)
        return results

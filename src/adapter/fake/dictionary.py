"""In-memory implementation of SourceAdapter for testing."""

from domain.model.word import DictionaryResult


class FakeSourceAdapter:
    """Fake dictionary source returning a preconfigured result or raising."""

    def __init__(
        self,
        source_id: str = "fake",
        result: DictionaryResult | None = None,
        error: Exception | None = None,
        results: dict[str, DictionaryResult] | None = None,
    ):
        self.source_id = source_id
        self.result = result
        self.error = error
        self.results = results or {}
        self.calls: list[str] = []

    async def resolve(self, headword: str) -> DictionaryResult | None:
        self.calls.append(headword)
        if self.error is not None:
            raise self.error
        return self.results.get(headword, self.result)

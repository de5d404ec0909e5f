from __future__ import annotations

from pathlib import Path

from tests.unit.fakes.file_storage import FakeFileStorage


class FakeCodeImageGenerator:
    """Registers a dummy PNG in the fake storage and remembers each URL."""

    def __init__(
        self,
        storage: FakeFileStorage,
        *,
        fail_on_call: int | None = None,
    ) -> None:
        self._storage = storage
        self._fail_on_call = fail_on_call
        self.urls: list[str] = []

    async def generate(self, *, url: str, target_dir: Path) -> Path:
        self.urls.append(url)
        if self._fail_on_call is not None and len(self.urls) == self._fail_on_call:
            raise RuntimeError("encoder exploded")
        path = Path(target_dir) / f"qr_{len(self.urls)}.png"
        self._storage.files[self._storage.relative_path(path)] = b"\x89PNG fake"
        return path

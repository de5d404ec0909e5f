import re
from concurrent.futures import ThreadPoolExecutor

from pdf_qr.backend.app.infrastructure.files import identifiers
from pdf_qr.backend.app.infrastructure.files.identifiers import TimestampIdGenerator, to_base36


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"
    assert to_base36(36 ** 3 + 1) == "1001"


def test_ids_are_lowercase_alphanumeric_and_url_safe():
    new_id = TimestampIdGenerator().new_id()

    assert re.fullmatch(r"[0-9a-z]+", new_id)
    assert len(new_id) > 8


def test_ids_unique_when_clock_stands_still(monkeypatch):
    monkeypatch.setattr(identifiers.time, "time_ns", lambda: 1_700_000_000_000_000_000)
    gen = TimestampIdGenerator(suffix_length=0)

    ids = [gen.new_id() for _ in range(1000)]

    assert len(set(ids)) == 1000


def test_ids_unique_across_threads():
    gen = TimestampIdGenerator()

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: gen.new_id(), range(5000)))

    assert len(set(ids)) == 5000

"""Shared builders for test documents and collaborators."""

from collections.abc import Sequence

from docqa.ingestion.extractor import DecodeError, ExtractionError

PROSE_WORDS = (
    "river",
    "mountain",
    "harvest",
    "lantern",
    "meadow",
    "quietly",
    "traveler",
    "morning",
    "village",
    "orchard",
    "whisper",
    "granite",
    "evening",
    "shelter",
    "compass",
    "weather",
)


def make_prose(min_chars: int, keyword: str | None = None) -> str:
    """Return prose of at least min_chars characters with no boilerplate markers."""
    words: list[str] = []
    if keyword:
        words.append(keyword)
    i = 0
    while len(" ".join(words)) < min_chars:
        words.append(PROSE_WORDS[i % len(PROSE_WORDS)])
        i += 1
    return " ".join(words)


def make_words(count: int, prefix: str = "word") -> str:
    """Return count distinct whitespace-separated tokens."""
    return " ".join(f"{prefix}{i}" for i in range(count))


class FakeRenderer:
    """In-memory DocumentRenderer.

    Pages whose text is None raise ExtractionError when read.
    """

    MAGIC = b"fake-document"

    def __init__(self, pages: Sequence[str | None]) -> None:
        self.pages = list(pages)
        self.visited: list[int] = []

    def open_document(self, data: bytes) -> list[str | None]:
        if data != self.MAGIC:
            raise DecodeError("Invalid PDF: file does not start with PDF header")
        return self.pages

    def page_count(self, handle: list[str | None]) -> int:
        return len(handle)

    def get_page_text(self, handle: list[str | None], page_index: int) -> str:
        self.visited.append(page_index)
        text = handle[page_index - 1]
        if text is None:
            raise ExtractionError(page_index, "bad content stream")
        return text


class RecordingObserver:
    """IngestionObserver that keeps every event for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def document_opened(self, total_pages: int) -> None:
        self.events.append(("opened", total_pages))

    def page_skipped(self, page, reason, text_length) -> None:
        self.events.append(("skipped", page, reason))

    def page_failed(self, page, error) -> None:
        self.events.append(("failed", page))

    def page_accepted(self, page, text_length, chunk_count) -> None:
        self.events.append(("accepted", page, chunk_count))

    def page_cap_reached(self, cap: int) -> None:
        self.events.append(("cap", cap))

    def completed(self, index) -> None:
        self.events.append(("completed", index.content_pages))


class FakeCompletion:
    """CompletionService returning a canned answer or raising an error."""

    def __init__(self, answer: str = "  The answer.  ", error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: Sequence[str]) -> bytes:
    """Build a minimal PDF with one Helvetica text run per page."""
    objects: list[bytes] = []
    page_count = len(pages)
    first_page_obj = 4
    kids = " ".join(f"{first_page_obj + 2 * i} 0 R" for i in range(page_count))

    objects.append(b"<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode())
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    for i, text in enumerate(pages):
        content_obj = first_page_obj + 2 * i + 1
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_obj} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({_escape(text)}) Tj ET".encode("latin-1") if text else b""
        objects.append(
            b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_offset}\n%%EOF\n".encode()
    return bytes(out)

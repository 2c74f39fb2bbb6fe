from pathlib import Path

from luhncheck.extractors import from_csv, from_pdf, from_txt


def _write_text_pdf(path: Path, lines: list[str]) -> None:
    """Write a one-page PDF showing each line in Helvetica, top to bottom."""
    shown = " 0 -14 Td ".join(f"({line}) Tj" for line in lines)
    content = f"BT /F1 12 Tf 72 720 Td {shown} ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        b"<< /Length %d >>\nstream\n%s\nendstream" % (len(content), content),
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n%s\nendobj\n" % (number, body)

    xref_at = len(out)
    out += b"xref\n0 %d\n0000000000 65535 f \n" % (len(objects) + 1)
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%EOF\n" % (
        len(objects) + 1,
        xref_at,
    )
    path.write_bytes(bytes(out))


def test_from_txt(tmp_path: Path) -> None:
    test_file = tmp_path / "codes.txt"
    test_file.write_text("4539 3195 0343 6467\n\n  059 \n", encoding="utf-8")

    kind, codes = from_txt(test_file)
    assert kind == "text"
    assert codes == ["4539 3195 0343 6467", "059"]


def test_from_csv_skips_header(tmp_path: Path) -> None:
    test_file = tmp_path / "codes.csv"
    test_file.write_text("card,note\n059,ok\n055 5,\n", encoding="utf-8")

    kind, codes = from_csv(test_file)
    assert kind == "csv"
    assert codes == ["059", "ok", "055 5"]


def test_from_csv_without_header(tmp_path: Path) -> None:
    test_file = tmp_path / "codes.csv"
    test_file.write_text("059,1\n046 043 65\n", encoding="utf-8")

    _kind, codes = from_csv(test_file)
    assert codes == ["059", "1", "046 043 65"]


def test_from_pdf(tmp_path: Path) -> None:
    test_file = tmp_path / "codes.pdf"
    _write_text_pdf(test_file, ["  059  ", "4539 3195 0343 6467"])

    kind, codes = from_pdf(test_file)
    assert kind == "pdf"
    assert codes == ["059", "4539 3195 0343 6467"]

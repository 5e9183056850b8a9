from pathlib import Path
import pytest
from shakesearch.loader import build_corpus

# Two works laid out like completeworks.txt (CRLF, title / blank / Contents).
WORKS = (
    "THE SONNETS\r\n\r\nContents\r\n\r\nby William Shakespeare\r\n\r\n"
    "From fairest creatures we desire increase, That thereby beauty's rose might never die.\r\n\r\n"
    "THE TRAGEDY OF HAMLET, PRINCE OF DENMARK\r\n\r\nContents\r\n\r\n"
    "ACT I\r\nSCENE I. Elsinore. A platform before the Castle.\r\n\r\n"
    "BERNARDO\r\nWho's there? Nay, answer me: stand, and unfold yourself.\r\n\r\n"
    "ACT III\r\nSCENE I. A room in the Castle.\r\n\r\n"
    "HAMLET\r\nTo be, or not to be, that is the question. Whether 'tis nobler in the mind to suffer.\r\n"
)

SOLILOQUY = (
    "To be or not to be, that is the question:\r\n"
    "Whether 'tis nobler in the mind to suffer\r\n"
    "The slings and arrows of outrageous fortune,\r\n"
    "Or to take arms against a sea of troubles,\r\n"
    "And by opposing end them?"
)

@pytest.fixture
def works():
    return build_corpus(WORKS)

@pytest.fixture
def works_file(tmp_path: Path) -> str:
    p = tmp_path / "completeworks.txt"
    p.write_bytes(WORKS.encode("utf-8"))
    return str(p)

@pytest.fixture
def soliloquy():
    return build_corpus(SOLILOQUY)

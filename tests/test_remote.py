import mmap
import os

import pytest

from smug.proc_maps import Maps
from smug.remote import IoVec, read, read_vecs


@pytest.fixture
def mapped(tmp_path):
    content = bytes(range(256)) * (mmap.PAGESIZE // 256)
    path = tmp_path / "mapped.bin"
    path.write_bytes(content)
    real = os.path.realpath(path)
    with path.open("rb") as fh, mmap.mmap(fh.fileno(), 0, access=mmap.ACCESS_READ):
        region = next(r for r in Maps.all_regions(os.getpid()) if r.path == real)
        yield region, content


def test_iovec_rejects_zero_length():
    with pytest.raises(ValueError):
        IoVec(0x1000, 0)


def test_iovec_end():
    assert IoVec(0x1000, 0x20).end == 0x1000 + 0x20


def test_read_mapped_file(mapped):
    region, content = mapped
    assert region.size == len(content)
    assert read(os.getpid(), region.start, len(content)) == content


def test_read_part_of_mapping(mapped):
    region, content = mapped
    assert read(os.getpid(), region.start + 16, 32) == content[16:48]


def test_read_unmapped_returns_none():
    assert read(os.getpid(), 0, 16) is None


def test_read_rejects_zero_length():
    with pytest.raises(ValueError):
        read(os.getpid(), 0x1000, 0)


def test_read_missing_process_returns_none():
    assert read(2**30, 0x1000, 8) is None


def test_read_vecs_skips_invalid(mapped):
    region, content = mapped
    vecs = [IoVec(0, 8), IoVec(region.start, 64), IoVec(8, 8), IoVec(region.start + 64, 64)]
    assert read_vecs(os.getpid(), vecs) == [None, content[:64], None, content[64:128]]


def test_read_vecs_requires_input():
    with pytest.raises(ValueError):
        read_vecs(os.getpid(), [])


def test_read_vecs_missing_process():
    assert read_vecs(2**30, [IoVec(0x1000, 8), IoVec(0x2000, 8)]) == [None, None]
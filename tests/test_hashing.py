import hashlib

from timemachinelogs.hashing import calculate_hash


def test_empty_file_sha256(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    assert calculate_hash(target).hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_large_file_matches_library_digest(tmp_path):
    data = bytes(range(256)) * 100  # larger than one read buffer
    target = tmp_path / "big.bin"
    target.write_bytes(data)
    assert calculate_hash(target) == hashlib.sha256(data).digest()


def test_other_algorithm(tmp_path):
    target = tmp_path / "f"
    target.write_bytes(b"abc")
    digest = calculate_hash(target, "md5")
    assert digest == hashlib.md5(b"abc").digest()
    assert len(digest) == 16


def test_same_content_same_hash(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"same content")
    second.write_bytes(b"same content")
    assert calculate_hash(first) == calculate_hash(second)


def test_different_content_different_hash(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"content one")
    second.write_bytes(b"content two")
    assert calculate_hash(first) != calculate_hash(second)
    assert len(calculate_hash(first)) == 32


def test_missing_file_gives_empty_bytes(tmp_path):
    assert calculate_hash(tmp_path / "does-not-exist") == b""


def test_directory_gives_empty_bytes(tmp_path):
    assert calculate_hash(tmp_path) == b""
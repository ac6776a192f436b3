from minigit.hashing import sha1_hex


def test_empty_input_digest():
    assert sha1_hex("") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_abc_digest():
    assert sha1_hex("abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_text_and_bytes_agree():
    assert sha1_hex("héllo") == sha1_hex("héllo".encode("utf-8"))


def test_digest_shape():
    digest = sha1_hex("some content")
    assert len(digest) == 40
    assert all(c in "0123456789abcdef" for c in digest)


def test_different_inputs_differ():
    assert sha1_hex("a") != sha1_hex("b")
    assert sha1_hex("a") == sha1_hex("a")
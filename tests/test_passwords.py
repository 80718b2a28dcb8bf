from finance_tracker.services.auth.passwords import hash_password, verify_password


def test_hash_is_salted_and_not_plaintext():
    first = hash_password('secret', iterations=1000)
    second = hash_password('secret', iterations=1000)

    assert 'secret' not in first
    assert first.startswith('pbkdf2_sha256$1000$')
    assert first != second


def test_verify_accepts_correct_password():
    stored = hash_password('secret', iterations=1000)
    assert verify_password('secret', stored)


def test_verify_rejects_wrong_password():
    stored = hash_password('secret', iterations=1000)
    assert not verify_password('Secret', stored)


def test_verify_rejects_malformed_hashes():
    assert not verify_password('secret', 'secret')
    assert not verify_password('secret', '')
    assert not verify_password('secret', 'md5$1$abc$def')
    assert not verify_password('secret', 'pbkdf2_sha256$notanumber$abc$def')
    assert not verify_password('secret', None)

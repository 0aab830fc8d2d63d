from starchain.core.validation import NO_ERRORS, IntegrityError, LinkageError, is_clean


def test_is_clean_on_marker():
    assert is_clean(NO_ERRORS)


def test_is_clean_on_findings():
    assert not is_clean([IntegrityError(height=1, hash="0" * 64)])


def test_finding_messages():
    assert IntegrityError(height=2, hash="ab").message == "Invalid block: 2, ab"
    assert LinkageError(height=3, previous_height=2).message == "Invalid link between 3 and 2"


def test_is_clean_on_ledger(ledger):
    assert is_clean(ledger.validate_chain())
    ledger.chain[0].hash = "0" * 64
    assert not is_clean(ledger.validate_chain())
